"""Translation engine implementations.

This package contains the concrete TransInterface engines. Importing it registers
every engine under its distinguished name.

Modules:
- DictionaryTranslation: Built-in lexicon resolver.
- OfflinePackTranslation: Installed offline language packs.
- RemoteTranslation: Remote translation endpoint.
"""

from core.trans.engines.trans_dictionary import DictionaryTranslation
from core.trans.engines.trans_offline_pack import OfflinePackTranslation
from core.trans.engines.trans_remote import RemoteTranslation

__all__: list[str] = ["DictionaryTranslation", "OfflinePackTranslation", "RemoteTranslation"]
