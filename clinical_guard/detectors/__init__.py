from .base import BaseDetector, PatternDetector
from .personal_number import PersonalNumberDetector
from .date import DateDetector
from .temporal import TemporalReferenceDetector
from .age import PreciseAgeDetector
from .name import FullNameDetector, InitialLastNameDetector
from .name_label import NameLabelDetector
from .name_tag import NameTagDetector
from .name_prose import NameInProseDetector
from .patient_id import PatientIdDetector
from .phone import PhoneDetector
from .email import EmailDetector
from .address import AddressDetector
from .ward_bed import WardBedTimestampDetector

__all__ = [
    "BaseDetector",
    "PatternDetector",
    "PersonalNumberDetector",
    "DateDetector",
    "TemporalReferenceDetector",
    "PreciseAgeDetector",
    "FullNameDetector",
    "InitialLastNameDetector",
    "NameLabelDetector",
    "NameTagDetector",
    "NameInProseDetector",
    "PatientIdDetector",
    "PhoneDetector",
    "EmailDetector",
    "AddressDetector",
    "WardBedTimestampDetector",
]
