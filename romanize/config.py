import os
from dataclasses import dataclass
from typing import Optional

from romanize import DICTIONARIES_DIR

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class RomanizerConfig:
    """Settings shared by the romanizer factories and the command line script."""
    language: str = "ja"
    pre_romanize: bool = True
    user_dict: Optional[str] = None  # path to a Janome/IPADIC CSV user dictionary
    user_dict_encoding: str = "utf8"

    @classmethod
    def from_env(cls) -> 'RomanizerConfig':
        """Build a config from ``ROMANIZE_*`` environment variables.

        Call ``load_dotenv()`` first if the values live in a ``.env`` file.
        """
        pre_romanize = os.getenv("ROMANIZE_PRE_ROMANIZE")
        return cls(
            language=os.getenv("ROMANIZE_LANGUAGE", "ja"),
            pre_romanize=True if pre_romanize is None else pre_romanize.strip().lower() in _TRUE_VALUES,
            user_dict=os.getenv("ROMANIZE_USER_DICT") or None,
            user_dict_encoding=os.getenv("ROMANIZE_USER_DICT_ENCODING", "utf8"),
        )

    def user_dict_path(self) -> Optional[str]:
        """Absolute or existing paths are used as given; bare names live in DICTIONARIES_DIR."""
        if not self.user_dict:
            return None
        if os.path.isabs(self.user_dict) or os.path.exists(self.user_dict):
            return self.user_dict
        return os.path.join(DICTIONARIES_DIR, self.user_dict)
