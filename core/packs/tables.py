"""Static data for the offline language packs.

Each pack dictionary maps pack-language text to English, in declaration order.
Reverse lookups (English to the pack language) are derived from these tables.
"""

from __future__ import annotations

from typing import Final, TypedDict

__all__: list[str] = ["CANNED_TRANSLATIONS", "PACK_CATALOG", "PACK_DICTIONARIES", "PackDescriptor"]


class PackDescriptor(TypedDict):
    code: str
    name: str
    native_name: str
    version: str
    size_mb: float
    download_source: str


PACK_CATALOG: Final[tuple[PackDescriptor, ...]] = (
    {
        "code": "ne",
        "name": "Nepali",
        "native_name": "नेपाली",
        "version": "1.0.0",
        "size_mb": 15.5,
        "download_source": "/language-packs/nepali-en.pack",
    },
    {
        "code": "si",
        "name": "Sinhala",
        "native_name": "සිංහල",
        "version": "1.0.0",
        "size_mb": 12.3,
        "download_source": "/language-packs/sinhala-en.pack",
    },
    {
        "code": "hi",
        "name": "Hindi",
        "native_name": "हिन्दी",
        "version": "1.0.0",
        "size_mb": 14.8,
        "download_source": "/language-packs/hindi-en.pack",
    },
)

PACK_DICTIONARIES: Final[dict[str, dict[str, str]]] = {
    "ne": {
        "नमस्ते": "Hello",
        "धन्यवाद": "Thank you",
        "माफ गर्नुहोस्": "Sorry",
        "कृपया": "Please",
        "हो": "Yes",
        "होइन": "No",
        "पानी": "Water",
        "खाना": "Food",
        "घर": "Home",
        "विद्यालय": "School",
        "काम": "Work",
        "समय": "Time",
        "पैसा": "Money",
        "मित्र": "Friend",
        "परिवार": "Family",
        "प्रेम": "Love",
        "खुशी": "Happiness",
        "दुःख": "Sadness",
        "स्वास्थ्य": "Health",
        "शिक्षा": "Education",
        # phrases
        "तपाईं कस्तो हुनुहुन्छ?": "How are you?",
        "मेरो नाम": "My name is",
        "म नेपाली बोल्छु": "I speak Nepali",
        "तपाईंलाई भेटेर खुशी लाग्यो": "Nice to meet you",
        "यो कति हो?": "How much is this?",
    },
    "si": {
        "ආයුබෝවන්": "Hello",
        "ස්තූතියි": "Thank you",
        "සමාවන්න": "Sorry",
        "කරුණාකර": "Please",
        "ඔව්": "Yes",
        "නැහැ": "No",
        "වතුර": "Water",
        "කෑම": "Food",
        "ගෙදර": "Home",
        "පාසල": "School",
        "වැඩ": "Work",
        "වෙලාව": "Time",
        "සල්ලි": "Money",
        "යාළුවා": "Friend",
        "පවුල": "Family",
        "ආදරය": "Love",
        "සතුට": "Happiness",
        "දුක": "Sadness",
        "සෞඛ්‍යය": "Health",
        "අධ්‍යාපනය": "Education",
        # phrases
        "ඔයා කොහොමද?": "How are you?",
        "මගේ නම": "My name is",
        "මම සිංහල කතා කරනවා": "I speak Sinhala",
        "ඔයාව මුණගැසීම සතුටක්": "Nice to meet you",
        "මේක කීයද?": "How much is this?",
    },
    "hi": {
        "नमस्ते": "Hello",
        "धन्यवाद": "Thank you",
        "माफ करें": "Sorry",
        "कृपया": "Please",
        "हाँ": "Yes",
        "नहीं": "No",
        "पानी": "Water",
        "खाना": "Food",
        "घर": "Home",
        "स्कूल": "School",
        "काम": "Work",
        "समय": "Time",
        "पैसा": "Money",
        "दोस्त": "Friend",
        "परिवार": "Family",
        "प्रेम": "Love",
        "खुशी": "Happiness",
        "दुख": "Sadness",
        "स्वास्थ्य": "Health",
        "शिक्षा": "Education",
        # phrases
        "आप कैसे हैं?": "How are you?",
        "मेरा नाम": "My name is",
        "मैं हिंदी बोलता हूँ": "I speak Hindi",
        "आपसे मिलकर खुशी हुई": "Nice to meet you",
        "यह कितने का है?": "How much is this?",
    },
}

# Fixed outputs checked before any dictionary matching. A source contained
# anywhere in the input returns the whole canned translation.
CANNED_TRANSLATIONS: Final[dict[str, tuple[tuple[str, str], ...]]] = {
    "ne-en": (
        ("नेपाल सुन्दर देश हो", "Nepal is a beautiful country"),
        ("म तपाईंलाई माया गर्छु", "I love you"),
    ),
    "si-en": (
        ("ශ්‍රී ලංකාව ලස්සන රටක්", "Sri Lanka is a beautiful country"),
        ("මම ඔයාට ආදරෙයි", "I love you"),
    ),
    "hi-en": (
        ("भारत एक सुंदर देश है", "India is a beautiful country"),
        ("मैं तुमसे प्यार करता हूँ", "I love you"),
    ),
    "en-ne": (
        ("nepal is a beautiful country", "नेपाल सुन्दर देश हो"),
        ("i love you", "म तपाईंलाई माया गर्छु"),
    ),
    "en-si": (
        ("sri lanka is a beautiful country", "ශ්‍රී ලංකාව ලස්සන රටක්"),
        ("i love you", "මම ඔයාට ආදරෙයි"),
    ),
    "en-hi": (
        ("india is a beautiful country", "भारत एक सुंदर देश है"),
        ("i love you", "मैं तुमसे प्यार करता हूँ"),
    ),
}
