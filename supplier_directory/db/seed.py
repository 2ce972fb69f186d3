"""
Demo suppliers loaded into a fresh store.
"""

from datetime import datetime, timezone
from typing import List

from ..models.supplier import Supplier

_DEMO_SUPPLIERS = [
    {
        "id": "1",
        "name": "EcoGreen Materials",
        "slug": "ecogreen-materials",
        "email": "partners@ecogreen.example",
        "phone": "+1 (555) 123-4567",
        "website": "https://ecogreen-materials.example",
        "description": "Sustainable packaging and eco-friendly raw materials supplier with global reach.",
        "city": "Portland, OR",
        "categories": ["Packaging", "Raw Materials", "Sustainable Products"],
        "created": (2024, 1, 15),
    },
    {
        "id": "2",
        "name": "TechParts International",
        "slug": "techparts-international",
        "email": "contact@techparts.example",
        "phone": "+1 (555) 987-6543",
        "website": "https://techparts.example",
        "description": "Premium electronics components and precision manufacturing parts.",
        "city": "Munich, Germany",
        "categories": ["Electronics", "Manufacturing"],
        "created": (2024, 1, 20),
    },
    {
        "id": "3",
        "name": "GlobalTextiles Co.",
        "slug": "globaltextiles-co",
        "email": "sales@globaltextiles.example",
        "phone": "+1 (555) 456-7890",
        "website": "https://globaltextiles.example",
        "description": "High-quality textiles and fabrics from sustainable sources worldwide.",
        "city": "Mumbai, India",
        "categories": ["Textiles", "Fabrics"],
        "created": (2024, 2, 1),
    },
    {
        "id": "4",
        "name": "Precision Metals",
        "slug": "precision-metals",
        "email": "info@precisionmetals.example",
        "phone": "+1 (555) 321-0987",
        "website": "https://precisionmetals.example",
        "description": "High-grade metal components and custom fabrication services.",
        "city": "Detroit, MI",
        "categories": ["Manufacturing", "Raw Materials"],
        "created": (2024, 2, 10),
    },
    {
        "id": "5",
        "name": "Organic Harvest",
        "slug": "organic-harvest",
        "email": "orders@organicharvest.example",
        "phone": "+1 (555) 654-3210",
        "website": "https://organicharvest.example",
        "description": "Certified organic food ingredients from sustainable farms.",
        "city": "Sacramento, CA",
        "categories": ["Food", "Organic", "Agriculture"],
        "created": (2024, 2, 15),
    },
    {
        "id": "6",
        "name": "ChemTech Solutions",
        "slug": "chemtech-solutions",
        "email": "support@chemtech.example",
        "phone": "+1 (555) 789-0123",
        "website": "https://chemtech.example",
        "description": "Specialized chemical compounds for industrial and laboratory applications.",
        "city": "Boston, MA",
        "categories": ["Manufacturing", "Raw Materials"],
        "created": (2024, 2, 20),
    },
]


def demo_suppliers() -> List[Supplier]:
    """Build fresh copies of the demo suppliers."""
    suppliers = []
    for entry in _DEMO_SUPPLIERS:
        data = dict(entry)
        created = datetime(*data.pop("created"), tzinfo=timezone.utc)
        suppliers.append(
            Supplier(**data, created_at=created, updated_at=created)
        )
    return suppliers
