from pathlib import Path

from namestamp.config import ENCODING

PATH = Path(__file__).absolute().parent / 'version'

__version__ = PATH.read_text(encoding=ENCODING).strip()
