"""
Tokenizer for Indonesian text.

Tokenization pipeline:
1. Lowercase conversion
2. Extract alphanumeric words (including hyphens, so "anak-anak" stays whole)
3. Filter stopwords (common Indonesian function words)
4. Filter pure numbers
5. Apply stemming (reduce to root form: "pembangunan" → "bangun")
6. Return list of meaningful tokens
"""

import re
from typing import List, Optional

from .stemmer import Stemmer, get_stemmer

# Indonesian function words that carry no meaning on their own
STOPWORDS = frozenset([
    'ada', 'adalah', 'agar', 'akan', 'aku', 'anda', 'apa', 'atau',
    'bagi', 'bahwa', 'belum', 'bila', 'dalam', 'dan', 'dari', 'dengan',
    'di', 'dia', 'hanya', 'ia', 'ini', 'itu', 'jika', 'juga', 'kami',
    'kamu', 'karena', 'ke', 'kita', 'mereka', 'oleh', 'pada',
    'para', 'saja', 'saya', 'sebuah', 'seorang', 'serta', 'sudah',
    'tetapi', 'untuk', 'yaitu', 'yakni', 'yang',
])

_WORD_PATTERN = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER_PATTERN = re.compile(r'^[0-9-]+$')


def tokenize(text: str, stemmer: Optional[Stemmer] = None, remove_stopwords: bool = True) -> List[str]:
    """
    Tokenize Indonesian text into root words.

    Args:
        text: Input text
        stemmer: Stemmer to use (default: process-wide stemmer)
        remove_stopwords: Drop common function words before stemming

    Returns:
        List of stems in text order

    Examples:
        >>> tokenize("Pembangunan jembatan itu dimulai tahun 2020.")
        ['bangun', 'jembatan', 'mulai', 'tahun']

        >>> tokenize("   ")
        []
    """
    if not text or not text.strip():
        return []

    tokens = _WORD_PATTERN.findall(text.lower())

    # Remove stopwords and pure numbers (keep alphanumeric like "covid19")
    tokens = [
        t for t in tokens
        if not (remove_stopwords and t in STOPWORDS) and not _NUMBER_PATTERN.match(t)
    ]

    if stemmer is None:
        stemmer = get_stemmer()

    return stemmer.stem_all(tokens)
