"""Built-in word and phrase tables, keyed by ``"{source}-{target}"``.

Table order and entry order are significant: substring scans take the first entry
encountered. Latin-script keys are stored lower-cased.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = ["BUILTIN_LEXICONS"]

_EN_HI: Final[dict[str, str]] = {
    "hello": "नमस्ते", "hi": "हैलो", "goodbye": "अलविदा", "bye": "बाय",
    "thank you": "धन्यवाद", "thanks": "धन्यवाद", "sorry": "माफ करें",
    "please": "कृपया", "yes": "हाँ", "no": "नहीं", "ok": "ठीक है", "okay": "ठीक है",
    "good": "अच्छा", "bad": "बुरा", "water": "पानी", "food": "खाना", "eat": "खाना",
    "home": "घर", "house": "घर", "school": "स्कूल", "work": "काम", "job": "नौकरी",
    "time": "समय", "money": "पैसा", "friend": "दोस्त", "family": "परिवार",
    "love": "प्रेम", "like": "पसंद", "want": "चाहते हैं", "need": "जरूरत",
    "come": "आओ", "go": "जाओ", "see": "देखो", "look": "देखो", "give": "दो",
    "take": "लो", "help": "मदद", "stop": "रुको", "wait": "इंतज़ार करो",
    "morning": "सुबह", "evening": "शाम", "night": "रात", "day": "दिन",
    "today": "आज", "tomorrow": "कल", "yesterday": "कल", "now": "अभी",
    "here": "यहाँ", "there": "वहाँ", "where": "कहाँ", "what": "क्या",
    "who": "कौन", "when": "कब", "why": "क्यों", "how": "कैसे",
    "i": "मैं", "you": "आप", "he": "वह", "she": "वह", "we": "हम", "they": "वे",
    "my": "मेरा", "your": "आपका", "his": "उसका", "her": "उसका",
    "am": "हूँ", "is": "है", "are": "हैं", "was": "था", "were": "थे",
    "will": "होगा", "can": "सकते हैं", "could": "सकते थे", "should": "चाहिए",
    "and": "और", "or": "या", "but": "लेकिन", "if": "अगर", "then": "तो",
    "how are you": "आप कैसे हैं", "how are you?": "आप कैसे हैं?",
    "what is your name": "आपका नाम क्या है", "my name is": "मेरा नाम है",
    "nice to meet you": "आपसे मिलकर खुशी हुई", "see you later": "बाद में मिलते हैं",
    "good morning": "शुभ प्रभात", "good evening": "शुभ संध्या", "good night": "शुभ रात्रि",
    "excuse me": "माफ करिए", "i love you": "मैं आपसे प्रेम करता हूँ",
    "i am fine": "मैं ठीक हूँ", "i am good": "मैं अच्छा हूँ",
}  # fmt: skip

_HI_EN: Final[dict[str, str]] = {
    "नमस्ते": "hello", "हैलो": "hi", "अलविदा": "goodbye", "बाय": "bye",
    "धन्यवाद": "thank you", "माफ करें": "sorry", "कृपया": "please",
    "हाँ": "yes", "नहीं": "no", "ठीक है": "okay", "अच्छा": "good", "बुरा": "bad",
    "पानी": "water", "खाना": "food", "घर": "home", "स्कूल": "school", "काम": "work",
    "समय": "time", "पैसा": "money", "दोस्त": "friend", "परिवार": "family",
    "प्रेम": "love", "पसंद": "like", "चाहते हैं": "want", "जरूरत": "need",
    "आओ": "come", "जाओ": "go", "देखो": "see", "दो": "give", "लो": "take",
    "मदद": "help", "रुको": "stop", "आज": "today", "कल": "tomorrow",
    "यहाँ": "here", "वहाँ": "there", "क्या": "what", "कौन": "who",
    "मैं": "i", "आप": "you", "वह": "he", "हम": "we", "वे": "they",
    "और": "and", "या": "or", "लेकिन": "but", "अगर": "if",
}  # fmt: skip

_EN_ES: Final[dict[str, str]] = {
    "hello": "hola", "hi": "hola", "thank you": "gracias", "sorry": "lo siento",
    "please": "por favor", "yes": "sí", "no": "no", "water": "agua", "food": "comida",
    "home": "casa", "school": "escuela", "work": "trabajo", "time": "tiempo",
    "money": "dinero", "friend": "amigo", "family": "familia", "love": "amor",
}  # fmt: skip

_ES_EN: Final[dict[str, str]] = {
    "hola": "hello", "gracias": "thank you", "lo siento": "sorry", "por favor": "please",
    "sí": "yes", "no": "no", "agua": "water", "comida": "food", "casa": "home",
    "escuela": "school", "trabajo": "work", "tiempo": "time", "dinero": "money",
    "amigo": "friend", "familia": "family", "amor": "love",
}  # fmt: skip

_EN_FR: Final[dict[str, str]] = {
    "hello": "bonjour", "hi": "salut", "goodbye": "au revoir", "thank you": "merci",
    "thanks": "merci", "sorry": "désolé", "please": "s'il vous plaît", "yes": "oui",
    "no": "non", "water": "eau", "food": "nourriture", "home": "maison", "house": "maison",
    "school": "école", "work": "travail", "job": "emploi", "time": "temps",
    "money": "argent", "friend": "ami", "family": "famille", "love": "amour",
    "happiness": "bonheur", "sadness": "tristesse", "health": "santé", "education": "éducation",
}  # fmt: skip

_FR_EN: Final[dict[str, str]] = {
    "bonjour": "hello", "salut": "hi", "au revoir": "goodbye", "merci": "thank you",
    "désolé": "sorry", "s'il vous plaît": "please", "oui": "yes", "non": "no",
    "eau": "water", "nourriture": "food", "maison": "home", "école": "school",
    "travail": "work", "emploi": "job", "temps": "time", "argent": "money",
    "ami": "friend", "famille": "family", "amour": "love", "bonheur": "happiness",
    "tristesse": "sadness", "santé": "health", "éducation": "education",
}  # fmt: skip

_EN_PT: Final[dict[str, str]] = {
    "hello": "olá", "hi": "oi", "goodbye": "tchau", "thank you": "obrigado",
    "thanks": "obrigado", "sorry": "desculpa", "please": "por favor", "yes": "sim",
    "no": "não", "water": "água", "food": "comida", "home": "casa", "house": "casa",
    "school": "escola", "work": "trabalho", "job": "trabalho", "time": "tempo",
    "money": "dinheiro", "friend": "amigo", "family": "família", "love": "amor",
    "happiness": "felicidade", "sadness": "tristeza", "health": "saúde", "education": "educação",
}  # fmt: skip

_PT_EN: Final[dict[str, str]] = {
    "olá": "hello", "oi": "hi", "tchau": "goodbye", "obrigado": "thank you",
    "desculpa": "sorry", "por favor": "please", "sim": "yes", "não": "no",
    "água": "water", "comida": "food", "casa": "home", "escola": "school",
    "trabalho": "work", "tempo": "time", "dinheiro": "money", "amigo": "friend",
    "família": "family", "amor": "love", "felicidade": "happiness", "tristeza": "sadness",
    "saúde": "health", "educação": "education",
}  # fmt: skip

_EN_NE: Final[dict[str, str]] = {
    "hello": "नमस्ते", "hi": "नमस्ते", "goodbye": "बिदाई", "thank you": "धन्यवाद",
    "thanks": "धन्यवाद", "sorry": "माफ गर्नुहोस्", "please": "कृपया", "yes": "हो",
    "no": "होइन", "water": "पानी", "food": "खाना", "home": "घर", "house": "घर",
    "school": "विद्यालय", "work": "काम", "job": "काम", "time": "समय", "money": "पैसा",
    "friend": "मित्र", "family": "परिवार", "love": "प्रेम", "happiness": "खुशी",
    "sadness": "दुःख", "health": "स्वास्थ्य", "education": "शिक्षा",
}  # fmt: skip

_NE_EN: Final[dict[str, str]] = {
    "नमस्ते": "Hello", "बिदाई": "Goodbye", "धन्यवाद": "Thank you", "माफ गर्नुहोस्": "Sorry",
    "कृपया": "Please", "हो": "Yes", "होइन": "No", "पानी": "Water", "खाना": "Food",
    "घर": "Home", "विद्यालय": "School", "काम": "Work", "समय": "Time", "पैसा": "Money",
    "मित्र": "Friend", "परिवार": "Family", "प्रेम": "Love", "खुशी": "Happiness",
    "दुःख": "Sadness", "स्वास्थ्य": "Health", "शिक्षा": "Education",
}  # fmt: skip

_EN_SI: Final[dict[str, str]] = {
    "hello": "ආයුබෝවන්", "hi": "ආයුබෝවන්", "goodbye": "ගිහින් එන්න", "thank you": "ස්තූතියි",
    "thanks": "ස්තූතියි", "sorry": "සමාවන්න", "please": "කරුණාකර", "yes": "ඔව්",
    "no": "නැහැ", "water": "වතුර", "food": "කෑම", "home": "ගෙදර", "house": "ගෙදර",
    "school": "පාසල", "work": "වැඩ", "job": "රැකියාව", "time": "වෙලාව", "money": "පිසු",
    "friend": "යාළුවා", "family": "පවුල", "love": "ආදරය", "happiness": "සතුට",
    "sadness": "දුක", "health": "සෞඛ්‍යය", "education": "අධ්‍යාපනය",
    "good morning": "සුභ උදෑසනක්", "good evening": "සුභ සන්ධ්‍යාවක්", "good night": "සුභ රාත්‍රියක්",
    "how are you": "ඔයා කොහොමද", "my name is": "මගේ නම", "nice to meet you": "ඔයාව මුණගැසීම සතුටක්",
}  # fmt: skip

_SI_EN: Final[dict[str, str]] = {
    "ආයුබෝවන්": "Hello", "ගිහින් එන්න": "Goodbye", "ස්තූතියි": "Thank you", "සමාවන්න": "Sorry",
    "කරුණාකර": "Please", "ඔව්": "Yes", "නැහැ": "No", "වතුර": "Water", "කෑම": "Food",
    "ගෙදර": "Home", "පාසල": "School", "වැඩ": "Work", "රැකියාව": "Job", "වෙලාව": "Time",
    "පිසු": "Money", "යාළුවා": "Friend", "පවුල": "Family", "ආදරය": "Love",
    "සතුට": "Happiness", "දුක": "Sadness", "සෞඛ්‍යය": "Health", "අධ්‍යාපනය": "Education",
    "සුභ උදෑසනක්": "Good morning", "සුභ සන්ධ්‍යාවක්": "Good evening", "සුභ රාත්‍රියක්": "Good night",
    "ඔයා කොහොමද": "How are you", "මගේ නම": "My name is", "මම සිංහල කතා කරනවා": "I speak Sinhala",
    "ඔයාව මුණගැසීම සතුටක්": "Nice to meet you", "මේක කීයද": "How much is this",
}  # fmt: skip

_EN_DE: Final[dict[str, str]] = {
    "hello": "hallo", "hi": "hallo", "goodbye": "auf wiedersehen", "thank you": "danke",
    "thanks": "danke", "sorry": "entschuldigung", "please": "bitte", "yes": "ja",
    "no": "nein", "water": "wasser", "food": "essen", "home": "zuhause", "house": "haus",
    "school": "schule", "work": "arbeit", "job": "job", "time": "zeit", "money": "geld",
    "friend": "freund", "family": "familie", "love": "liebe", "happiness": "glück",
    "sadness": "traurigkeit", "health": "gesundheit", "education": "bildung",
}  # fmt: skip

_DE_EN: Final[dict[str, str]] = {
    "hallo": "hello", "auf wiedersehen": "goodbye", "danke": "thank you",
    "entschuldigung": "sorry", "bitte": "please", "ja": "yes", "nein": "no",
    "wasser": "water", "essen": "food", "zuhause": "home", "haus": "house",
    "schule": "school", "arbeit": "work", "job": "job", "zeit": "time", "geld": "money",
    "freund": "friend", "familie": "family", "liebe": "love", "glück": "happiness",
    "traurigkeit": "sadness", "gesundheit": "health", "bildung": "education",
}  # fmt: skip

_EN_BN: Final[dict[str, str]] = {
    "hello": "হ্যালো", "hi": "হাই", "goodbye": "বিদায়", "thank you": "ধন্যবাদ",
    "thanks": "ধন্যবাদ", "sorry": "দুঃখিত", "please": "অনুগ্রহ করে", "yes": "হ্যাঁ",
    "no": "না", "water": "পানি", "food": "খাবার", "home": "বাড়ি", "house": "বাড়ি",
    "school": "স্কুল", "work": "কাজ", "job": "চাকরি", "time": "সময়", "money": "টাকা",
    "friend": "বন্ধু", "family": "পরিবার", "love": "ভালোবাসা", "happiness": "খুশি",
    "sadness": "দুঃখ", "health": "স্বাস্থ্য", "education": "শিক্ষা",
}  # fmt: skip

_BN_EN: Final[dict[str, str]] = {
    "হ্যালো": "hello", "হাই": "hi", "বিদায়": "goodbye", "ধন্যবাদ": "thank you",
    "দুঃখিত": "sorry", "অনুগ্রহ করে": "please", "হ্যাঁ": "yes", "না": "no",
    "পানি": "water", "খাবার": "food", "বাড়ি": "home", "স্কুল": "school", "কাজ": "work",
    "চাকরি": "job", "সময়": "time", "টাকা": "money", "বন্ধু": "friend", "পরিবার": "family",
    "ভালোবাসা": "love", "খুশি": "happiness", "দুঃখ": "sadness", "স্বাস্থ্য": "health",
    "শিক্ষা": "education",
}  # fmt: skip

_EN_TA: Final[dict[str, str]] = {
    "hello": "வணக்கம்", "hi": "ஹாய்", "goodbye": "பிரியாவிடை", "thank you": "நன்றி",
    "thanks": "நன்றி", "sorry": "மன்னிக்கவும்", "please": "தயவுசெய்து", "yes": "ஆம்",
    "no": "இல்லை", "water": "தண்ணீர்", "food": "உணவு", "home": "வீடு", "house": "வீடு",
    "school": "பள்ளி", "work": "வேலை", "job": "வேலை", "time": "நேரம்", "money": "பணம்",
    "friend": "நண்பர்", "family": "குடும்பம்", "love": "அன்பு", "happiness": "மகிழ்ச்சி",
    "sadness": "துக்கம்", "health": "உடல்நலம்", "education": "கல்வி",
}  # fmt: skip

_TA_EN: Final[dict[str, str]] = {
    "வணக்கம்": "hello", "ஹாய்": "hi", "பிரியாவிடை": "goodbye", "நன்றி": "thank you",
    "மன்னிக்கவும்": "sorry", "தயவுசெய்து": "please", "ஆம்": "yes", "இல்லை": "no",
    "தண்ணீர்": "water", "உணவு": "food", "வீடு": "home", "பள்ளி": "school", "வேலை": "work",
    "நேரம்": "time", "பணம்": "money", "நண்பர்": "friend", "குடும்பம்": "family",
    "அன்பு": "love", "மகிழ்ச்சி": "happiness", "துக்கம்": "sadness", "உடல்நலம்": "health",
    "கல்வி": "education",
}  # fmt: skip

_EN_TE: Final[dict[str, str]] = {
    "hello": "హలో", "hi": "హాయ్", "thank you": "ధన్యవాదాలు", "sorry": "క్షమించండి",
    "please": "దయచేసి", "yes": "అవును", "no": "లేదు", "water": "నీరు", "food": "ఆహారం", "home": "ఇల్లు",
}  # fmt: skip

_TE_EN: Final[dict[str, str]] = {"హలో": "hello", "హాయ్": "hi", "ధన్యవాదాలు": "thank you", "క్షమించండి": "sorry"}

_EN_UR: Final[dict[str, str]] = {
    "hello": "ہیلو", "hi": "سلام", "thank you": "شکریہ", "sorry": "معاف کریں",
    "please": "براہ کرم", "yes": "ہاں", "no": "نہیں", "water": "پانی", "food": "کھانا", "home": "گھر",
}  # fmt: skip

_UR_EN: Final[dict[str, str]] = {"ہیلو": "hello", "سلام": "hi", "شکریہ": "thank you", "معاف کریں": "sorry"}

_EN_ZH: Final[dict[str, str]] = {
    "hello": "你好", "hi": "嗨", "thank you": "謝謝", "sorry": "對不起",
    "please": "請", "yes": "是", "no": "不是", "water": "水", "food": "食物", "home": "家",
}  # fmt: skip

_ZH_EN: Final[dict[str, str]] = {"你好": "hello", "嗨": "hi", "謝謝": "thank you", "對不起": "sorry"}

_EN_JA: Final[dict[str, str]] = {
    "hello": "こんにちは", "hi": "やあ", "thank you": "ありがとう", "sorry": "ごめんなさい",
    "please": "お願いします", "yes": "はい", "no": "いいえ", "water": "水", "food": "食べ物", "home": "家",
}  # fmt: skip

_JA_EN: Final[dict[str, str]] = {"こんにちは": "hello", "やあ": "hi", "ありがとう": "thank you", "ごめんなさい": "sorry"}

_EN_KO: Final[dict[str, str]] = {
    "hello": "안녕하세요", "hi": "안녕", "thank you": "감사합니다", "sorry": "죄송합니다",
    "please": "제발", "yes": "네", "no": "아니오", "water": "물", "food": "음식", "home": "집",
}  # fmt: skip

_KO_EN: Final[dict[str, str]] = {"안녕하세요": "hello", "안녕": "hi", "감사합니다": "thank you", "죄송합니다": "sorry"}

_EN_AR: Final[dict[str, str]] = {
    "hello": "مرحبا", "hi": "أهلا", "thank you": "شكرا", "sorry": "آسف",
    "please": "من فضلك", "yes": "نعم", "no": "لا", "water": "ماء", "food": "طعام", "home": "منزل",
}  # fmt: skip

_AR_EN: Final[dict[str, str]] = {"مرحبا": "hello", "أهلا": "hi", "شكرا": "thank you", "آسف": "sorry"}

_EN_RU: Final[dict[str, str]] = {
    "hello": "привет", "hi": "привет", "thank you": "спасибо", "sorry": "извините",
    "please": "пожалуйста", "yes": "да", "no": "нет", "water": "вода", "food": "еда", "home": "дом",
}  # fmt: skip

_RU_EN: Final[dict[str, str]] = {"привет": "hello", "спасибо": "thank you", "извините": "sorry", "пожалуйста": "please"}

BUILTIN_LEXICONS: Final[dict[str, dict[str, str]]] = {
    "en-hi": _EN_HI,
    "hi-en": _HI_EN,
    "en-es": _EN_ES,
    "es-en": _ES_EN,
    "en-fr": _EN_FR,
    "fr-en": _FR_EN,
    "en-pt": _EN_PT,
    "pt-en": _PT_EN,
    "en-ne": _EN_NE,
    "ne-en": _NE_EN,
    "en-si": _EN_SI,
    "si-en": _SI_EN,
    "en-de": _EN_DE,
    "de-en": _DE_EN,
    "en-bn": _EN_BN,
    "bn-en": _BN_EN,
    "en-ta": _EN_TA,
    "ta-en": _TA_EN,
    "en-te": _EN_TE,
    "te-en": _TE_EN,
    "en-ur": _EN_UR,
    "ur-en": _UR_EN,
    "en-zh": _EN_ZH,
    "zh-en": _ZH_EN,
    "en-ja": _EN_JA,
    "ja-en": _JA_EN,
    "en-ko": _EN_KO,
    "ko-en": _KO_EN,
    "en-ar": _EN_AR,
    "ar-en": _AR_EN,
    "en-ru": _EN_RU,
    "ru-en": _RU_EN,
}
