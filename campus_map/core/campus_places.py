from typing import Any

# UFPA Campus Belém (Guamá) places loaded into an empty store
# Coordinates are approximate, in decimal degrees
CAMPUS_PLACES: list[dict[str, Any]] = [
    # Administration
    {
        "id": 1,
        "name": "Reitoria",
        "latitude": "-1.473880", "longitude": "-48.456030",
        "category": "administration",
        "description": "Rectorate and central administration"
    },
    # Libraries and study
    {
        "id": 2,
        "name": "Biblioteca Central",
        "latitude": "-1.475310", "longitude": "-48.456170",
        "category": "library",
        "description": "Main university library"
    },
    # Food
    {
        "id": 3,
        "name": "Restaurante Universitário - Básico",
        "latitude": "-1.474680", "longitude": "-48.457930",
        "category": "food",
        "description": "University restaurant, basic sector"
    },
    {
        "id": 4,
        "name": "Restaurante Universitário - Profissional",
        "latitude": "-1.477020", "longitude": "-48.454320",
        "category": "food",
        "description": "University restaurant, professional sector"
    },
    # Institutes
    {
        "id": 5,
        "name": "Instituto de Tecnologia (ITEC)",
        "latitude": "-1.474370", "longitude": "-48.454680",
        "category": "institute",
        "description": "Engineering and technology"
    },
    {
        "id": 6,
        "name": "Instituto de Ciências Exatas e Naturais (ICEN)",
        "latitude": "-1.475830", "longitude": "-48.457010",
        "category": "institute",
        "description": "Mathematics, physics, chemistry and computing"
    },
    {
        "id": 7,
        "name": "Instituto de Ciências Jurídicas (ICJ)",
        "latitude": "-1.476610", "longitude": "-48.454420",
        "category": "institute",
        "description": "Law school"
    },
    # Leisure and sports
    {
        "id": 8,
        "name": "Vadião",
        "latitude": "-1.475100", "longitude": "-48.457210",
        "category": "leisure",
        "description": "Student gathering area"
    },
    {
        "id": 9,
        "name": "Ginásio de Esportes",
        "latitude": "-1.478220", "longitude": "-48.455530",
        "category": "sports",
        "description": "University gymnasium"
    },
    # Services
    {
        "id": 10,
        "name": "Centro de Convenções Benedito Nunes",
        "latitude": "-1.476170", "longitude": "-48.459200",
        "category": "events",
        "description": "Convention center"
    },
    {
        "id": 11,
        "name": "Hospital Universitário Bettina Ferro de Souza",
        "latitude": "-1.470190", "longitude": "-48.454900",
        "category": "hospital",
        "description": "University hospital"
    },
    # Gates
    {
        "id": 12,
        "name": "Portão 3",
        "latitude": "-1.471930", "longitude": "-48.458520",
        "category": "entrance",
        "description": "Main pedestrian gate, Perimetral avenue"
    },
]
