"""Demo data written the first time an empty store is loaded."""
from __future__ import annotations

from anymais.core.security import hash_password


def build_seed_schema() -> dict:
    """Fresh copy of the demo dataset (tables only, no version tag)."""
    return {
        "users": [
            {
                "id": "u1",
                "name": "Maria Silva",
                "email": "maria@example.com",
                "phone": "+55 11 99999-8888",
                "image": "https://i.pravatar.cc/150?img=5",
                "plan": "start",
                "favorites": [],
                "password": hash_password("123"),
            }
        ],
        "pets": [
            {
                "id": "pet-1",
                "ownerId": "u1",
                "name": "Paçoca",
                "breed": "Vira-lata",
                "age": 3,
                "weight": 12,
                "type": "dog",
                "image": "https://images.unsplash.com/photo-1543466835-00a7907e9de1?auto=format&fit=crop&w=400&q=80",
                "bio": "Sou muito brincalhão!",
                "availableForDating": False,
                "vaccines": [
                    {"id": "v1", "name": "Raiva (Rabies)", "date": "2023-10-10", "nextDueDate": "2024-10-10"},
                    {"id": "v2", "name": "V10", "date": "2023-05-15", "nextDueDate": "2024-05-15"},
                ],
            },
            {
                "id": "pet-2",
                "ownerId": "u1",
                "name": "Mimi",
                "breed": "Persa",
                "age": 5,
                "weight": 4,
                "type": "cat",
                "image": "https://images.unsplash.com/photo-1514888286974-6c03e2ca1dba?auto=format&fit=crop&w=400&q=80",
                "bio": "Rainha da casa.",
                "availableForDating": False,
                "vaccines": [],
            },
        ],
        "ongs": [
            {
                "id": "ong-1",
                "name": "Patinhas Felizes",
                "description": "Resgate e adoção responsável de cães e gatos na zona sul.",
                "location": "São Paulo, SP",
                "coordinates": {"lat": -23.5505, "lng": -46.6333},
                "phone": "(11) 3456-7890",
                "email": "contato@patinhasfelizes.org",
                "image": "https://ui-avatars.com/api/?name=Patinhas+Felizes&background=random&size=200",
                "pixKey": "contato@patinhasfelizes.org",
            },
            {
                "id": "ong-2",
                "name": "Amigos de Quatro Patas",
                "description": "Abrigo temporário e castração a preço popular.",
                "location": "Rio de Janeiro, RJ",
                "coordinates": {"lat": -22.9068, "lng": -43.1729},
                "phone": "(21) 2345-6789",
                "image": "https://ui-avatars.com/api/?name=Amigos+de+Quatro+Patas&background=random&size=200",
                "bankInfo": {"bank": "Banco do Brasil", "agency": "1234-5", "account": "67890-1"},
            },
        ],
        "appointments": [
            {
                "id": "apt-1",
                "userId": "u1",
                "petId": "pet-1",
                "providerId": "sp-1",
                "providerName": "Clínica Veterinária Amigo Fiel",
                "date": "2024-11-20",
                "time": "10:00",
                "status": "scheduled",
            }
        ],
        "adoptionInterests": [],
    }


def empty_schema() -> dict:
    return {"users": [], "pets": [], "ongs": [], "appointments": [], "adoptionInterests": []}
