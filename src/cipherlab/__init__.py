"""Classical ciphers (Caesar, Vigenère) and the cryptanalysis used to break them."""

from cipherlab import log as _log  # noqa: F401  (installs the NullHandler)
from cipherlab.classical.monoalphabetic.caesar import brute_force_caesar, caesar_cipher
from cipherlab.classical.polyalphabetic.vigenere import vigenere_cipher
from cipherlab.core.features import frequency_analysis, index_of_coincidence
from cipherlab.core.kasiski import kasiski_examination

__version__ = "0.1.0"

__all__ = [
    "caesar_cipher",
    "vigenere_cipher",
    "brute_force_caesar",
    "frequency_analysis",
    "kasiski_examination",
    "index_of_coincidence",
]
