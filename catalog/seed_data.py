CATEGORIES = [
    {"name": "Делови за мотор", "name_en": "Engine Parts", "slug": "engine-parts", "description": "Делови за мотор и систем за гориво", "icon": "🔧"},
    {"name": "Кочници", "name_en": "Brakes", "slug": "brakes", "description": "Кочни плочки, дискови и цилиндри", "icon": "🛑"},
    {"name": "Филтери", "name_en": "Filters", "slug": "filters", "description": "Масленец, воздушен и горивен филтер", "icon": "🌪️"},
    {"name": "Електрика", "name_en": "Electrical", "slug": "electrical", "description": "Батерии, свеќи и електрични делови", "icon": "⚡"},
    {"name": "Каросерија", "name_en": "Body Parts", "slug": "body-parts", "description": "Фарови, браници и делови за каросерија", "icon": "🚗"},
    {"name": "Гуми и Тркала", "name_en": "Tyres & Wheels", "slug": "tyres-wheels", "description": "Гуми, тркала и делови за ходување", "icon": "🛞"},
    {"name": "Климатизација", "name_en": "Air Conditioning", "slug": "air-conditioning", "description": "Делови за климатизација и греење", "icon": "❄️"},
    {"name": "Трансмисија", "name_en": "Transmission", "slug": "transmission", "description": "Квачило, менувач и трансмисија", "icon": "⚙️"},
]

CAR_BRANDS = [
    ("BMW", "bmw"), ("Mercedes-Benz", "mercedes-benz"), ("Audi", "audi"),
    ("Volkswagen", "volkswagen"), ("Hyundai", "hyundai"), ("Kia", "kia"),
    ("Toyota", "toyota"), ("Honda", "honda"), ("Ford", "ford"), ("Opel", "opel"),
    ("Peugeot", "peugeot"), ("Renault", "renault"), ("Citroën", "citroen"),
    ("Fiat", "fiat"), ("Škoda", "skoda"), ("Seat", "seat"), ("Mazda", "mazda"),
    ("Nissan", "nissan"), ("Mitsubishi", "mitsubishi"), ("Subaru", "subaru"),
]

# Models seeded for the brands most common in the region, keyed by brand slug
CAR_MODELS = {
    "bmw": ["X1", "X3", "X5", "3 Series", "5 Series", "7 Series", "1 Series", "Z4"],
    "mercedes-benz": ["A-Class", "C-Class", "E-Class", "S-Class", "GLA", "GLC", "GLE", "ML"],
    "hyundai": ["i10", "i20", "i30", "i40", "Tucson", "Santa Fe", "Elantra", "Accent", "Genesis"],
    "volkswagen": ["Golf", "Passat", "Polo", "Tiguan", "Touran", "Jetta", "Beetle", "Arteon"],
}

PRODUCTS = [
    {
        "name": "Кочни плочки Brembo Premium",
        "description": "Висококвалитетни кочни плочки за европски возила. Одлична спирачка моќ и долготрајност.",
        "price": "2850.00",
        "category": "brakes",
        "image_url": "https://images.unsplash.com/photo-1558618047-3c8c76ca7d13?w=400&h=300&fit=crop",
        "part_number": "BRM-P50020",
        "brand": "Brembo",
        "compatible_brands": ["BMW", "Mercedes-Benz", "Audi"],
        "compatible_models": ["3 Series", "C-Class", "A4"],
        "compatible_years": ["2015", "2016", "2017", "2018", "2019", "2020"],
    },
    {
        "name": "Турбо пунач Garrett Motion GT1749V",
        "description": "Оригинален турбо пунач за дизел мотори. Зголемена моќност и подобрена економичност.",
        "price": "18500.00",
        "category": "engine-parts",
        "image_url": "https://images.unsplash.com/photo-1486262715619-67b85e0b08d3?w=400&h=300&fit=crop",
        "part_number": "GTM-GT1749V",
        "brand": "Garrett Motion",
        "compatible_brands": ["Volkswagen", "Škoda", "Seat"],
        "compatible_models": ["Golf", "Octavia", "Leon"],
        "compatible_years": ["2012", "2013", "2014", "2015", "2016"],
    },
    {
        "name": "Масленец филтер Bosch Premium",
        "description": "Висококвалитетен масленец филтер за заштита на мотор. Комплетна филтрација на масло.",
        "price": "850.00",
        "category": "filters",
        "image_url": "https://images.unsplash.com/photo-1541443131876-44b03de101c5?w=400&h=300&fit=crop",
        "part_number": "BSH-0451103318",
        "brand": "Bosch",
        "compatible_brands": ["BMW", "Mercedes-Benz", "Audi", "Volkswagen"],
        "compatible_models": ["320d", "C220d", "A4 TDI", "Golf TDI"],
        "compatible_years": ["2010", "2011", "2012", "2013", "2014", "2015"],
    },
    {
        "name": "Батерија Varta Blue Dynamic E11",
        "description": "Автомобилска батерија 74Ah. Долготрајна и сигурна за сите временски услови.",
        "price": "6500.00",
        "category": "electrical",
        "image_url": "https://images.unsplash.com/photo-1609592067849-5b774eb4fa14?w=400&h=300&fit=crop",
        "part_number": "VARTA-E11-74AH",
        "brand": "Varta",
        "compatible_brands": ["Hyundai", "Kia", "Toyota", "Honda"],
        "compatible_models": ["i30", "Ceed", "Corolla", "Civic"],
        "compatible_years": ["2012", "2013", "2014", "2015", "2016", "2017", "2018"],
    },
    {
        "name": "Кочни дискови Zimmermann Sport",
        "description": "Перфорирани спортски кочни дискови за подобрена перформанса при кочење.",
        "price": "4200.00",
        "category": "brakes",
        "image_url": "https://images.unsplash.com/photo-1558618047-3c8c76ca7d13?w=400&h=300&fit=crop",
        "part_number": "ZIM-100.3234.52",
        "brand": "Zimmermann",
        "compatible_brands": ["BMW", "Mercedes-Benz"],
        "compatible_models": ["X3", "GLC"],
        "compatible_years": ["2016", "2017", "2018", "2019", "2020"],
    },
    {
        "name": "Свеќи за палење NGK Laser Platinum",
        "description": "Платински свеќи за палење со подолг животен век и подобра перформанса.",
        "price": "1650.00",
        "category": "electrical",
        "image_url": "https://images.unsplash.com/photo-1600586747245-a42b05b20afe?w=400&h=300&fit=crop",
        "part_number": "NGK-PFR7S8EG",
        "brand": "NGK",
        "compatible_brands": ["Toyota", "Honda", "Mazda"],
        "compatible_models": ["Corolla", "Civic", "CX-5"],
        "compatible_years": ["2015", "2016", "2017", "2018", "2019"],
    },
    {
        "name": "Амортизери Monroe OESpectrum",
        "description": "Оригинални спецификации амортизери за комфорт и сигурност при возење.",
        "price": "3200.00",
        "category": "tyres-wheels",
        "image_url": "https://images.unsplash.com/photo-1581833971358-2c8b550f87b3?w=400&h=300&fit=crop",
        "part_number": "MON-G7440",
        "brand": "Monroe",
        "compatible_brands": ["Ford", "Opel"],
        "compatible_models": ["Focus", "Astra"],
        "compatible_years": ["2014", "2015", "2016", "2017", "2018"],
    },
    {
        "name": "Ремен за распоред Gates PowerGrip",
        "description": "Висококвалитетен ремен за распоред на мотор со долг животен век.",
        "price": "1850.00",
        "category": "engine-parts",
        "image_url": "https://images.unsplash.com/photo-1486262715619-67b85e0b08d3?w=400&h=300&fit=crop",
        "part_number": "GTS-5455XS",
        "brand": "Gates",
        "compatible_brands": ["Peugeot", "Citroën", "Renault"],
        "compatible_models": ["308", "C4", "Megane"],
        "compatible_years": ["2012", "2013", "2014", "2015", "2016"],
    },
    {
        "name": "Браник предна Mercedes W204",
        "description": "Оригинален предна браник за Mercedes C-Class W204 во одлична состојба.",
        "price": "12800.00",
        "category": "body-parts",
        "image_url": "https://images.unsplash.com/photo-1544967881-6ad5e8b4b7d8?w=400&h=300&fit=crop",
        "part_number": "MB-W204-FB-OEM",
        "brand": "Mercedes-Benz",
        "compatible_brands": ["Mercedes-Benz"],
        "compatible_models": ["C-Class"],
        "compatible_years": ["2007", "2008", "2009", "2010", "2011", "2012", "2013", "2014"],
    },
]

ADMIN = {
    "username": "admin",
    "email": "admin@megaautoparts.mk",
    "first_name": "Admin",
    "last_name": "User",
}
