"""Marker-word lists and the counters that score text against them.

Lists are regular expressions matched as whole words; they were tuned on real
subtitle files and are kept exactly as collected.
"""

from __future__ import annotations

from collections.abc import Iterable

import regex


class WordMarkers:
    """Counts whole-word matches of each pattern, summed over the list."""

    __slots__ = ("words", "_patterns")

    def __init__(self, *words: str):
        self.words = words
        # regex treats combining marks as word characters, which Thai and Vietnamese need
        self._patterns = tuple(regex.compile(rf"\b{word}\b") for word in words)

    def count(self, text: str) -> int:
        return sum(len(pattern.findall(text)) for pattern in self._patterns)


class SubstringMarkers:
    """Counts plain substring occurrences; for scripts without word delimiters."""

    __slots__ = ("groups",)

    def __init__(self, *groups: Iterable[str]):
        self.groups = tuple(tuple(group) for group in groups)

    def count(self, text: str) -> int:
        return sum(text.count(piece) for group in self.groups for piece in group)


class BestOfMarkers:
    """Scores with several alternative lists and keeps the highest count."""

    __slots__ = ("alternatives",)

    def __init__(self, *alternatives: WordMarkers):
        self.alternatives = alternatives

    def count(self, text: str) -> int:
        return max(markers.count(text) for markers in self.alternatives)


ENGLISH = WordMarkers("we", "are", "and", "your?", "what")
ENGLISH_US = WordMarkers("color", "flavor", "honor", "humor", "neighbor", "honor")
ENGLISH_GB = WordMarkers("colour", "flavour", "honour", "humour", "neighbour", "honour")

DANISH = WordMarkers(
    "vi", "han", "og", "jeg", "var", "men", "gider", "bliver", "virkelig", "kommer", "tilbage", "Hej"
)
NOT_DANISH = WordMarkers("ut", "deg", "meg", "merkelig", "mye", "spørre")

NORWEGIAN = WordMarkers("vi", "er", "og", "jeg", "var", "men")
NOT_NORWEGIAN = WordMarkers("siger", "dig", "mig", "mærkelig", "tilbage", "spørge")

SWEDISH = WordMarkers("vi", "är", "och", "Jag", "inte", "för")

SPANISH = WordMarkers(
    "qué", "eso", "muy", "estoy?", "ahora", "hay", "tú", "así", "cuando", "cómo", "él", "sólo",
    "quiero", "gracias", "puedo", "bueno", "soy", "hacer", "fue", "eres", "usted", "tienes", "puede",
    "[Ss]eñor", "ese", "voy", "quién", "creo", "hola", "dónde", "sus", "verdad", "quieres", "mucho",
    "entonces", "estaba", "tiempo", "esa", "mejor", "hombre", "hace", "dios", "también", "están",
    "siempre", "hasta", "ahí", "siento", "puedes",
)

# French words that never appear in Spanish or Italian dialogue
FRENCH_NOT_SPANISH = WordMarkers(
    "[Cc]'est", "pas", "vous", "pour", "suis", "Pourquoi", "maison", "souviens", "quelque"
)
PORTUGUESE_NOT_SPANISH = WordMarkers(
    "[NnCc]ão", "Então", "h?ouve", "pessoal", "rapariga", "tivesse", "fizeste",
    "jantar", "conheço", "atenção", "foste", "milhões", "devias", "ganhar", "raios",
)

ITALIAN = WordMarkers(
    "Cosa", "sono", "Grazie", "Buongiorno", "bene", "questo", "ragazzi", "propriamente", "numero",
    "hanno", "giorno", "faccio", "davvero", "negativo", "essere", "vuole", "sensitivo", "venire",
)

FRENCH = WordMarkers(
    "pas", "[vn]ous", "ça", "une", "pour", "[mt]oi", "dans", "elle", "tout", "plus", "[bmt]on", "suis",
    "avec", "oui", "fait", "ils", "être", "faire", "comme", "était", "quoi", "ici", "veux",
    "rien", "dit", "où", "votre", "pourquoi", "sont", "cette", "peux", "alors", "comment", "avez",
    "très", "même", "merci", "ont", "aussi", "chose", "voir", "allez", "tous", "ces", "deux",
)
ROMANIAN_NOT_FRENCH = WordMarkers("[Vv]reau", "[Ss]înt", "[Aa]cum", "pentru", "domnule", "aici")

PORTUGUESE = WordMarkers(
    "[Nn]ão", "[Ee]ntão", "uma", "ele", "bem", "isso", "você", "sim", "meu", "muito", "estou", "ela",
    "fazer", "tem", "já", "minha", "tudo", "só", "tenho", "agora", "vou", "seu", "quem",
    "há", "lhe", "quero", "nós", "coisa", "são", "ter", "dizer", "eles", "pode", "bom", "mesmo", "mim",
    "estava", "assim", "estão", "até", "quer", "temos", "acho", "obrigado", "também",
    "tens", "deus", "quê", "ainda", "noite",
)

GERMAN = WordMarkers("und", "auch", "sich", "bin", "hast", "möchte")
DUTCH = WordMarkers("van", "een", "[Hh]et", "m(?:ij|ĳ)", "z(?:ij|ĳ)n")
POLISH = WordMarkers("Czy", "ale", "ty", "siê", "jest", "mnie")

GREEK = WordMarkers(
    "μου", "[Εε]ίναι", "αυτό", "Τόμπυ", "καλά", "Ενταξει", "πρεπει", "Λοιπον", "τιποτα", "ξερεις"
)
RUSSIAN = WordMarkers(
    "[Ээч]?то", "[Нн]е", "[ТтМмбв]ы", "Да", "[Нн]ет", "Он", "его", "тебя", "как", "меня", "Но",
    "всё", "мне", "вас", "знаю", "ещё", "за", "нас", "чтобы", "был",
)
UKRAINIAN = WordMarkers(
    "[Нн]і", "[Пп]ривіт", "[Цц]е", "[Щщ]о", "[Йй]ого", "[Вв]ін", "[Яя]к", "[Гг]аразд", "[Яя]кщо",
    "[Мм]ені", "[Тт]вій", "[Її]х", "[Вв]ітаю", "[Дд]якую", "вже", "було", "був", "цього",
    "нічого", "немає", "може", "знову", "бо", "щось", "щоб", "цим", "тобі", "хотів", "твоїх", "мої",
    "мій", "має", "їм", "йому", "дуже",
)
BULGARIAN = WordMarkers("[Кк]акво", "тук", "може", "Как", "Ваше")

ARABIC = WordMarkers("من", "هل", "لا", "فى", "لقد", "ما")
HEBREW = WordMarkers("אתה", "אולי", "הוא", "בסדר", "יודע", "טוב")

CROATIAN_AND_SERBIAN = WordMarkers(
    "sam", "ali", "nije", "samo", "ovo", "kako", "dobro", "sve", "tako", "će", "mogu", "ću", "zašto",
    "nešto", "za",
)
# ijekavian and ekavian spellings of the same words, pairwise
CROATIAN = WordMarkers(
    "što", "ovdje", "gdje", "kamo", "tko", "prije", "uvijek", "vrijeme", "vidjeti", "netko",
    "vidio", "nitko", "bok", "lijepo", "oprosti", "htio", "mjesto", "oprostite", "čovjek", "dolje",
    "čovječe", "dvije", "dijete", "dio", "poslije", "događa", "vjerovati", "vjerojatno", "vjerujem",
    "točno", "razumijem", "vidjela", "cijeli", "svijet", "obitelj", "volio", "sretan", "dovraga",
    "svijetu", "htjela", "vidjeli", "negdje", "želio", "ponovno", "djevojka", "umrijeti", "čovjeka",
    "mjesta", "djeca", "osjećam", "uopće", "djecu", "naprijed", "obitelji", "doista", "mjestu",
    "lijepa", "također", "riječ", "tijelo",
)
SERBIAN = WordMarkers(
    "šta", "ovde", "gde", "ko", "pre", "uvek", "vreme", "videti", "neko",
    "video", "niko", "ćao", "lepo", "izvini", "hteo", "mesto", "izvinite", "čovek", "dole",
    "čoveče", "dve", "dete", "deo", "posle", "dešava", "verovati", "verovatno", "verujem", "tačno",
    "razumem", "videla", "ceo", "svet", "porodica", "voleo", "srećan", "dođavola", "svetu", "htela",
    "videli", "negde", "želeo", "ponovo", "devojka", "umreti", "čoveka", "mesta", "deca", "osećam",
    "uopšte", "decu", "napred", "porodicu", "zaista", "mestu", "lepa", "takođe", "reč", "telo",
)
SERBIAN_CYRILLIC = WordMarkers(
    "сам", "али", "није", "само", "ово", "како", "добро", "све", "тако", "ће", "могу", "ћу", "зашто",
    "нешто", "за", "шта", "овде",
)

VIETNAMESE = WordMarkers("không", "[Tt]ôi", "anh", "đó", "ông")
HUNGARIAN = WordMarkers("hogy", "lesz", "tudom", "vagy", "mondtam", "még")
# "benim" appears twice and counts double
TURKISH = WordMarkers(
    "için", "Tamam", "Hayır", "benim", "daha", "deðil", "önce", "lazým", "benim", "çalýþýyor",
    "burada", "efendim",
)
INDONESIAN = WordMarkers(
    "yang", "tahu", "bisa", "akan", "tahun", "tapi", "dengan", "untuk", "rumah", "dalam", "sudah",
    "bertemu",
)
THAI = WordMarkers(
    "โอ", "โรเบิร์ต", "วิตตอเรีย", "ดร", "คุณตำรวจ", "ราเชล", "ไม่", "เลดดิส", "พระเจ้า", "เท็ดดี้",
    "หัวหน้า", "แอนดรูว์",
)
KOREAN = WordMarkers("그리고", "아니야", "하지만", "말이야", "그들은", "우리가")
FINNISH = WordMarkers(
    "että", "kuin", "minä", "mitään", "Mutta", "siitä", "täällä", "poika", "Kiitos", "enää", "vielä",
    "tässä",
)
ROMANIAN = BestOfMarkers(
    WordMarkers(
        "pentru", "oamenii", "decât", "[Vv]reau", "[Ss]înt", "Asteaptã", "Fãrã", "aici", "domnule",
        "trãiascã", "niciodatã", "înseamnã", "vorbesti", "fãcut", "spune",
    ),
    WordMarkers(
        "pentru", "oamenii", "decat", "[Tt]rebuie", "[Aa]cum", "Poate", "vrea", "soare", "nevoie",
        "daca", "echilibrul", "vorbesti", "zeului", "atunci", "memoria", "soarele",
    ),
)

# Repeated characters each add to the score.
JAPANESE = SubstringMarkers(
    ("シ", "ュ", "シン", "シ", "ン", "ユ"),
    ("イ", "ン", "チ", "ェ", "ク", "ハ"),
    ("シ", "ュ", "う", "シ", "ン", "サ"),
    ("シ", "ュ", "シ", "ン", "だ", "う"),
)
CHINESE_SIMPLIFIED = SubstringMarkers(
    ("是", "是早", "吧", "的", "爱", "上好"),
    ("的", "啊", "好", "好", "亲", "的"),
    ("谢", "走", "吧", "晚", "上", "好"),
    ("来", "卡", "拉", "吐", "滚", "他"),
)
