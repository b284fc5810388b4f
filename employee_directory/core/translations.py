"""Static translation tables and locale lookup helpers."""
from __future__ import annotations

import re
from typing import Dict, Iterable, Optional

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        # navigation
        "employees": "Employees",
        "addNew": "Add New",
        # employee list
        "employeeList": "Employee List",
        "firstName": "First Name",
        "lastName": "Last Name",
        "dateOfEmployment": "Date of Employment",
        "dateOfBirth": "Date of Birth",
        "phone": "Phone",
        "email": "Email",
        "department": "Department",
        "position": "Position",
        "actions": "Actions",
        "edit": "Edit",
        "delete": "Delete",
        "noEmployeesFound": "No employees found.",
        # add / edit
        "addEmployee": "Add Employee",
        "editEmployee": "Edit Employee",
        "youAreEditing": "You are editing",
        "save": "Save",
        "cancel": "Cancel",
        # departments
        "analytics": "Analytics",
        "tech": "Tech",
        # positions
        "junior": "Junior",
        "medior": "Medior",
        "senior": "Senior",
        "pleaseSelect": "Please Select",
        # delete confirmation
        "areYouSure": "Are you sure?",
        "selectedEmployeeWillBeDeleted": "Selected Employee record of {name} will be deleted",
        "proceed": "Proceed",
        # validation
        "firstNameRequired": "First name is required",
        "lastNameRequired": "Last name is required",
        "emailRequired": "Email is required",
        "emailInvalid": "Please enter a valid email address",
        "emailNotUnique": "This email address is already in use",
        "phoneRequired": "Phone number is required",
        "phoneInvalid": "Please enter a valid phone number",
        "departmentRequired": "Department is required",
        "positionRequired": "Position is required",
        "dateOfEmploymentRequired": "Date of employment is required",
        "dateOfBirthRequired": "Date of birth is required",
        "dateInvalid": "Please enter a valid date",
        # success
        "employeeAdded": "Employee added successfully",
        "employeeUpdated": "Employee updated successfully",
        "employeeDeleted": "Employee deleted successfully",
        # pagination
        "page": "Page",
        "of": "of",
        "previous": "Previous",
        "next": "Next",
    },
    "tr": {
        "employees": "Çalışanlar",
        "addNew": "Yeni Ekle",
        "employeeList": "Çalışan Listesi",
        "firstName": "Ad",
        "lastName": "Soyad",
        "dateOfEmployment": "İşe Başlama Tarihi",
        "dateOfBirth": "Doğum Tarihi",
        "phone": "Telefon",
        "email": "E-posta",
        "department": "Departman",
        "position": "Pozisyon",
        "actions": "İşlemler",
        "edit": "Düzenle",
        "delete": "Sil",
        "noEmployeesFound": "Çalışan bulunamadı.",
        "addEmployee": "Çalışan Ekle",
        "editEmployee": "Çalışan Düzenle",
        "youAreEditing": "Düzenliyorsunuz",
        "save": "Kaydet",
        "cancel": "İptal",
        "analytics": "Analitik",
        "tech": "Teknoloji",
        "junior": "Junior",
        "medior": "Medior",
        "senior": "Senior",
        "pleaseSelect": "Lütfen Seçin",
        "areYouSure": "Emin misiniz?",
        "selectedEmployeeWillBeDeleted": "{name} adlı çalışanın kaydı silinecek",
        "proceed": "Devam Et",
        "firstNameRequired": "Ad alanı zorunludur",
        "lastNameRequired": "Soyad alanı zorunludur",
        "emailRequired": "E-posta alanı zorunludur",
        "emailInvalid": "Geçerli bir e-posta adresi girin",
        "emailNotUnique": "Bu e-posta adresi zaten kullanımda",
        "phoneRequired": "Telefon numarası zorunludur",
        "phoneInvalid": "Geçerli bir telefon numarası girin",
        "departmentRequired": "Departman alanı zorunludur",
        "positionRequired": "Pozisyon alanı zorunludur",
        "dateOfEmploymentRequired": "İşe başlama tarihi zorunludur",
        "dateOfBirthRequired": "Doğum tarihi zorunludur",
        "dateInvalid": "Geçerli bir tarih girin",
        "employeeAdded": "Çalışan başarıyla eklendi",
        "employeeUpdated": "Çalışan başarıyla güncellendi",
        "employeeDeleted": "Çalışan başarıyla silindi",
        "page": "Sayfa",
        "of": "den",
        "previous": "Önceki",
        "next": "Sonraki",
    },
}


def is_supported(language: Optional[str]) -> bool:
    return bool(language) and language in TRANSLATIONS


def translate(key: str, language: str = DEFAULT_LANGUAGE, **replacements: object) -> str:
    """Look up ``key`` for ``language``.

    Falls back to the default locale's text, then to the key itself.
    ``{placeholder}`` markers are replaced from ``replacements``.
    """

    text = (
        TRANSLATIONS.get(language, {}).get(key)
        or TRANSLATIONS[DEFAULT_LANGUAGE].get(key)
        or key
    )
    for placeholder, value in replacements.items():
        text = re.sub(r"\{" + re.escape(placeholder) + r"\}", lambda _m: str(value), text)
    return text


def detect_language(*candidates: Optional[str]) -> str:
    """Pick the first supported locale from values like ``tr_TR.UTF-8`` or ``en-GB``."""

    for candidate in candidates:
        if not candidate:
            continue
        code = re.split(r"[-_.@]", candidate.strip(), maxsplit=1)[0].lower()
        if is_supported(code):
            return code
    return DEFAULT_LANGUAGE


def available_languages() -> Iterable[str]:
    return tuple(TRANSLATIONS)
