"""
Word banks for two-word mnemonic names.

Two pools per bank: a left pool of adjectives and a right pool of names.
Criteria:
- Memorable, easy to say and type
- Lowercase ASCII, no separators inside a word
- No profanity, slurs, or awkward combos

The "default" bank is the canonical one. The "minimal" bank is kept as a
named preset for callers that want short, predictable output.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from .errors import UnknownPresetError

# ~110 adjectives
ADJECTIVES: Tuple[str, ...] = (
    "admiring", "adoring", "affectionate", "agitated", "amazing",
    "angry", "awesome", "beautiful", "blissful", "bold",
    "boring", "brave", "busy", "charming", "clever",
    "compassionate", "competent", "condescending", "confident", "cool",
    "cranky", "crazy", "dazzling", "determined", "distracted",
    "dreamy", "eager", "ecstatic", "elastic", "elated",
    "elegant", "eloquent", "epic", "exciting", "fervent",
    "festive", "flamboyant", "focused", "friendly", "frosty",
    "funny", "gallant", "gifted", "goofy", "gracious",
    "great", "happy", "hardcore", "heuristic", "hopeful",
    "hungry", "infallible", "inspiring", "intelligent", "interesting",
    "jolly", "jovial", "keen", "kind", "laughing",
    "loving", "lucid", "magical", "modest", "musing",
    "mystifying", "naughty", "nervous", "nice", "nifty",
    "nostalgic", "objective", "optimistic", "peaceful", "pedantic",
    "pensive", "practical", "priceless", "quirky", "quizzical",
    "recursing", "relaxed", "reverent", "romantic", "sad",
    "serene", "sharp", "silly", "sleepy", "stoic",
    "strange", "stupefied", "suspicious", "sweet", "tender",
    "thirsty", "trusting", "unruffled", "upbeat", "vibrant",
    "vigilant", "vigorous", "wizardly", "wonderful", "xenodochial",
    "youthful", "zealous", "zen",
)

# ~250 surnames of notable scientists, mathematicians and engineers
SURNAMES: Tuple[str, ...] = (
    # A - C
    "agnesi", "albattani", "allen", "almeida", "antonelli",
    "archimedes", "ardinghelli", "aryabhata", "austin", "babbage",
    "banach", "banzai", "bardeen", "bartik", "bassi",
    "beaver", "bell", "benz", "bhabha", "bhaskara",
    "black", "blackburn", "blackwell", "bohr", "booth",
    "borg", "bose", "bouman", "boyd", "brahmagupta",
    "brattain", "brown", "buck", "burnell", "cannon",
    "carson", "cartwright", "carver", "cerf", "chandrasekhar",
    "chaplygin", "chatelet", "chatterjee", "chaum", "chebyshev",
    "clarke", "cohen", "colden", "cori", "cray",
    "curie", "curran",
    # D - H
    "darwin", "davinci", "dewdney", "dhawan", "diffie",
    "dijkstra", "dirac", "driscoll", "dubinsky", "easley",
    "edison", "einstein", "elbakyan", "elgamal", "elion",
    "ellis", "engelbart", "euclid", "euler", "faraday",
    "feistel", "fermat", "fermi", "feynman", "franklin",
    "gagarin", "galileo", "galois", "ganguly", "gates",
    "gauss", "germain", "goldberg", "goldstine", "goldwasser",
    "golick", "goodall", "gould", "greider", "grothendieck",
    "haibt", "hamilton", "haslett", "hawking", "heisenberg",
    "hellman", "hermann", "herschel", "hertz", "heyrovsky",
    "hodgkin", "hofstadter", "hoover", "hopper", "hugle",
    "hypatia",
    # I - M
    "ishizaka", "jackson", "jang", "jemison", "jennings",
    "jepsen", "johnson", "joliot", "jones", "kalam",
    "kapitsa", "kare", "keldysh", "keller", "kepler",
    "khayyam", "khorana", "kilby", "kirch", "knuth",
    "kowalevski", "lalande", "lamarr", "lamport", "leakey",
    "leavitt", "lederberg", "lehmann", "lewin", "lichterman",
    "liskov", "lovelace", "lumiere", "mahavira", "margulis",
    "matsumoto", "maxwell", "mayer", "mccarthy", "mcclintock",
    "mclaren", "mclean", "mcnulty", "meitner", "mendel",
    "mendeleev", "meninsky", "merkle", "mestorf", "mirzakhani",
    "montalcini", "moore", "morse", "moser", "murdock",
    # N - S
    "napier", "nash", "neumann", "newton", "nightingale",
    "nobel", "noether", "northcutt", "noyce", "panini",
    "pare", "pascal", "pasteur", "payne", "perlman",
    "pike", "poincare", "poitras", "proskuriakova", "ptolemy",
    "raman", "ramanujan", "rhodes", "ride", "ritchie",
    "robinson", "roentgen", "rosalind", "rubin", "saha",
    "sammet", "sanderson", "szilard", "shamir", "shannon",
    "shaw", "shirley", "shockley", "shtern", "sinoussi",
    "snyder", "solomon", "spence", "stonebraker", "sutherland",
    "swanson", "swartz", "swirles",
    # T - Z
    "taussig", "tesla", "tharp", "thompson", "torvalds",
    "tu", "turing", "varahamihira", "vaughan", "villani",
    "visvesvaraya", "volhard", "wescoff", "wilbur", "wiles",
    "williams", "williamson", "wilson", "wing", "wozniak",
    "wright", "wu", "yalow", "yonath", "zhukovsky",
    # Later additions
    "brahe", "bunsen", "cavendish", "copernicus", "coulomb",
    "dalton", "doppler", "fibonacci", "fourier", "fresnel",
    "gibbs", "hilbert", "hooke", "huygens", "joule",
    "kelvin", "laplace", "leibniz", "lorentz", "mach",
    "ohm", "planck", "riemann", "rutherford", "schrodinger",
    "volta", "watt",
)

# The minimal bank: two adjectives, three names
MINIMAL_ADJECTIVES: Tuple[str, ...] = ("crazy", "amazing")
MINIMAL_NAMES: Tuple[str, ...] = ("steve", "alan", "einstein")

DEFAULT_PRESET = "default"

PRESETS: "MappingProxyType[str, Tuple[Tuple[str, ...], Tuple[str, ...]]]" = MappingProxyType({
    DEFAULT_PRESET: (ADJECTIVES, SURNAMES),
    "minimal": (MINIMAL_ADJECTIVES, MINIMAL_NAMES),
})


def get_preset(name: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Look up a built-in word bank by name.

    Args:
        name: Preset name (see PRESETS)

    Returns:
        Tuple of (left words, right words)

    Raises:
        UnknownPresetError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name, available=sorted(PRESETS)) from None


def preset_sizes() -> Dict[str, Tuple[int, int]]:
    """Return {preset name: (left size, right size)}."""
    return {name: (len(left), len(right)) for name, (left, right) in PRESETS.items()}
