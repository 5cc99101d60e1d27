"""Go subset -> Arduino C++ translator."""

from .api import (  # noqa: F401
    transpile,
    transpile_stream,
    translate_unit,
    parse_source,
    dump_tree,
)
from .errors import (  # noqa: F401
    TranslationError,
    ParseError,
    UnsupportedConstruct,
    UnsupportedArity,
    UnsupportedType,
    UnsupportedInitializer,
)
