import pytest

from api.models import ContactMessage

pytestmark = pytest.mark.django_db


def test_contact_message_is_stored(api_client):
    response = api_client.post("/api/contact", {
        "name": "Ана",
        "email": "ana@example.mk",
        "message": "Do you stock parts for a 2012 Golf?",
    })

    assert response.status_code == 201
    message = ContactMessage.objects.get(id=response.data["id"])
    assert message.phone is None
    assert message.email == "ana@example.mk"


def test_contact_message_with_phone(api_client):
    response = api_client.post("/api/contact", {
        "name": "Ана",
        "email": "ana@example.mk",
        "phone": "070111222",
        "message": "Call me back",
    })

    assert response.status_code == 201
    assert response.data["phone"] == "070111222"


def test_contact_message_validation(api_client):
    response = api_client.post("/api/contact", {"name": "Ана", "email": "ana", "message": ""})

    assert response.status_code == 400
    assert set(response.data["errors"]) == {"email", "message"}
    assert ContactMessage.objects.count() == 0
