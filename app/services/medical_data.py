"""
Clinic Medical Vocabulary

Static lookup tables for the clinic's medical-text engine: the canonical
condition list, condition synonyms, brand-to-generic medicine aliases and the
medicine autocomplete list. Tables are read-only and validated once at import.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from app.core.exceptions import MedicalDataError


# ============================================================================
# CANONICAL CONDITIONS
# ============================================================================

COMMON_CONDITIONS: tuple[str, ...] = (
    "Fever",
    "Cough",
    "Cold",
    "Flu",
    "Headache",
    "Migraine",
    "Diabetes",
    "Hypertension",
    "High Blood Pressure",
    "Asthma",
    "Allergy",
    "Chest Pain",
    "Back Pain",
    "Stomach Pain",
    "Abdominal Pain",
    "Throat Infection",
    "Sore Throat",
    "Diarrhea",
    "Vomiting",
    "Nausea",
    "Weakness",
    "Fatigue",
    "Dizziness",
    "Infection",
    "Viral Fever",
    "Bacterial Infection",
    "Skin Rash",
    "Joint Pain",
    "Arthritis",
    "Acidity",
    "Gastritis",
    "Constipation",
    "Anxiety",
    "Depression",
    "Insomnia",
    "Dengue",
    "Malaria",
    "Typhoid",
    "COVID-19",
    "Pneumonia",
    "Bronchitis",
)


# ============================================================================
# CONDITION SYNONYMS - detection order follows registration order
# ============================================================================

CONDITION_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Fever": ("fever", "pyrexia", "high temperature", "temp", "viral fever"),
    "Cough": ("cough", "coughing", "dry cough", "wet cough", "productive cough"),
    "Cold": ("cold", "common cold", "running nose", "nasal congestion"),
    "Headache": ("headache", "head ache", "head pain", "cephalalgia"),
    "Hypertension": ("hypertension", "high bp", "high blood pressure", "hbp", "bp high"),
    "Diabetes": ("diabetes", "sugar", "high sugar", "blood sugar", "dm", "diabetic"),
    "Stomach Pain": ("stomach pain", "stomach ache", "abdominal pain", "belly pain", "tummy pain"),
    "Throat Infection": ("throat infection", "sore throat", "throat pain", "pharyngitis"),
    "Chest Pain": ("chest pain", "chest discomfort", "angina"),
    "Back Pain": ("back pain", "backache", "lower back pain", "upper back pain"),
})


# ============================================================================
# BRAND ALIASES - lower-cased brand token -> generic name
# ============================================================================

BRAND_TO_GENERIC: Mapping[str, str] = MappingProxyType({
    # Paracetamol brands
    "crocin": "Paracetamol",
    "dolo": "Paracetamol",
    "calpol": "Paracetamol",
    "metacin": "Paracetamol",
    "tylenol": "Paracetamol",

    # Ibuprofen brands
    "brufen": "Ibuprofen",
    "combiflam": "Ibuprofen + Paracetamol",
    "advil": "Ibuprofen",

    # Antibiotics
    "augmentin": "Amoxicillin + Clavulanic Acid",
    "azithral": "Azithromycin",
    "zithromax": "Azithromycin",
    "ciprofloxacin": "Ciprofloxacin",

    # Antacids
    "gelusil": "Antacid",
    "digene": "Antacid",
    "eno": "Antacid",
    "pantoprazole": "Pantoprazole",
    "omeprazole": "Omeprazole",

    # Cough syrups
    "benadryl": "Diphenhydramine",
    "corex": "Cough Syrup",
    "ascoril": "Cough Syrup",

    # Others
    "aspirin": "Aspirin",
    "disprin": "Aspirin",
    "metformin": "Metformin",
    "glycomet": "Metformin",
    "amlodipine": "Amlodipine",
    "norvasc": "Amlodipine",
})


# ============================================================================
# MEDICINE SUGGESTIONS - autocomplete list for prescription forms
# ============================================================================

COMMON_MEDICINES: tuple[str, ...] = (
    # Clinic house brands
    "Prixicam",
    "Becocnx 60K",
    "Becoprx 60K",
    "Escnx LS 5",
    "CNXCLAV",
    "Betagold 24",
    "Bycine CD3",
    "Becocnx OD",
    "Becoprx OD",
    "Gdmin D",
    "Biluracise M",

    # Generics with dosages
    "Paracetamol 500mg",
    "Paracetamol 650mg",
    "Ibuprofen 400mg",
    "Ibuprofen 600mg",
    "Amoxicillin 500mg",
    "Azithromycin 500mg",
    "Ciprofloxacin 500mg",
    "Metformin 500mg",
    "Metformin 850mg",
    "Amlodipine 5mg",
    "Amlodipine 10mg",
    "Aspirin 75mg",
    "Aspirin 150mg",
    "Atorvastatin 10mg",
    "Atorvastatin 20mg",
    "Pantoprazole 40mg",
    "Omeprazole 20mg",
    "Cetirizine 10mg",
    "Montelukast 10mg",
    "Levothyroxine 50mcg",
    "Levothyroxine 100mcg",
    "Cough Syrup 10ml TID",
    "Multivitamin 1 tab OD",
    "Vitamin D3 60000 IU",
    "Calcium 500mg",
    "Iron 100mg",
    "Folic Acid 5mg",
    "Ondansetron 4mg",
    "Domperidone 10mg",
    "Ranitidine 150mg",
    "Diclofenac 50mg",
    "Prednisolone 5mg",
    "Dexamethasone 4mg",
    "Salbutamol Inhaler",
    "Insulin Glargine",

    # Popular brands
    "Crocin 500mg",
    "Dolo 650mg",
    "Brufen 400mg",
    "Combiflam",
    "Augmentin 625mg",
    "Azee 500mg",
    "Montek LC",
    "Levocetrizine 5mg",
)


def _build_known_medicine_names() -> frozenset[str]:
    """Single-word, lower-cased medicine names used to rejoin hyphenated spellings."""
    names = set(BRAND_TO_GENERIC)
    for generic in BRAND_TO_GENERIC.values():
        if " " not in generic:
            names.add(generic.lower())
    for medicine in COMMON_MEDICINES:
        names.add(medicine.split()[0].lower())
    return frozenset(names)


KNOWN_MEDICINE_NAMES: frozenset[str] = _build_known_medicine_names()


def validate_tables(
    conditions: Iterable[str] = COMMON_CONDITIONS,
    synonyms: Mapping[str, Iterable[str]] = CONDITION_SYNONYMS,
    brands: Mapping[str, str] = BRAND_TO_GENERIC,
) -> None:
    """
    Check the vocabulary tables for configuration errors.

    Args:
        conditions: Canonical condition vocabulary.
        synonyms: Condition -> synonym phrases.
        brands: Brand token -> generic name.

    Raises:
        MedicalDataError: If any table is degenerate.
    """
    vocabulary = set(conditions)

    for condition, phrases in synonyms.items():
        phrases = list(phrases)
        if condition not in vocabulary:
            raise MedicalDataError(f"Synonym key '{condition}' is not a canonical condition")
        if not phrases:
            raise MedicalDataError(f"Condition '{condition}' has no synonyms")
        for phrase in phrases:
            if not phrase or phrase != phrase.strip().lower():
                raise MedicalDataError(
                    f"Synonym '{phrase}' for '{condition}' must be non-empty lower-case text"
                )
        if condition.lower() not in phrases:
            raise MedicalDataError(f"Condition '{condition}' does not list itself as a synonym")

    for brand, generic in brands.items():
        if not brand or brand != brand.lower() or len(brand.split()) != 1:
            raise MedicalDataError(f"Brand key '{brand}' must be a single lower-case token")
        if not generic.strip():
            raise MedicalDataError(f"Brand '{brand}' maps to an empty generic name")


validate_tables()
