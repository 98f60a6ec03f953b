"""Pytest configuration shared by all tests"""

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

import pytest

# Add project root to path for katadasar imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from katadasar import config  # noqa: E402
from katadasar.stemming import Stemmer, reset_stemmer  # noqa: E402

# Small dictionary so rule tests do not depend on the bundled word list
ROOT_WORDS = frozenset("""
    abai adil adu ajar apa asing baik baju bagai bagi badan bangun baru beli
    benar beri bisik bom budaya buang bui buku capai celana cinta dahulu daerah
    darat daya dua ekonomi fitnah gerak gila hajar hancur hantu iman ilmu jarah
    jauh jual jubah kaji karya kasih kerja kritik kulit kupas labuh laku langgan
    lewat lipat makan makmur medan mei milik minum muka mulai nasihat nganga
    nilai nuklir nyala nyanyi nyata nyawa pengaruh percaya peran populer
    prediksi promosi proteksi puas pukul puruk qasar rambut raup ringkas rumah
    sakit sekolah sembunyi seni serta siapa stabil suap suara syarat syukur taat
    tahan tangkap tani tarung tebar teka terang terbang teriak ternak transkripsi
    udara untung vonis warna yakin yoga ziarah
""".split())


@pytest.fixture
def root_words():
    """Root words of the test dictionary"""
    return ROOT_WORDS


@pytest.fixture
def stemmer():
    """Stemmer over the test dictionary"""
    return Stemmer(ROOT_WORDS)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """
    Keep tests independent of the developer's environment.

    - No KATADASAR_* variables and no .env loading
    - Fresh default stemmer for every test
    - Console and file handlers from setup_logging removed afterwards
    """
    for name in ("KATADASAR_DICTIONARY_PATH", "KATADASAR_CACHE_SIZE",
                 "KATADASAR_LOG_LEVEL", "KATADASAR_LOG_FILE"):
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "_env_loaded", True)

    root_logger = logging.getLogger()
    level = root_logger.level

    reset_stemmer()
    yield
    reset_stemmer()

    # Drop handlers installed by setup_logging; pytest installs its own per phase
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
