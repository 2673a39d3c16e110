__version__ = "0.1.0"

from .exceptions import (
    DictionaryViewerError as DictionaryViewerError,
    ValidationError as ValidationError,
    DataImportError as DataImportError,
    DuplicateSessionError as DuplicateSessionError,
)

from .models import (
    Entry as Entry,
    Session as Session,
    SessionInfo as SessionInfo,
    HighlightFragment as HighlightFragment,
    ValidationResult as ValidationResult,
    ValidationSeverity as ValidationSeverity,
)

from .collation import (
    collation_key as collation_key,
    compare_words as compare_words,
    sort_entries as sort_entries,
)

from .loader import (
    default_data_dir as default_data_dir,
    load_session_file as load_session_file,
    load_sessions as load_sessions,
    load_session_directory as load_session_directory,
    parse_session as parse_session,
    check_sources as check_sources,
)

from .store import EntryStore as EntryStore

from .search import (
    search_dictionary as search_dictionary,
    search_session as search_session,
    highlight as highlight,
)

from .browser import DictionaryBrowser as DictionaryBrowser

__all__ = [
    # Store and view state
    "EntryStore",
    "DictionaryBrowser",
    # Models
    "Entry",
    "Session",
    "SessionInfo",
    "HighlightFragment",
    "ValidationResult",
    "ValidationSeverity",
    # Search
    "search_dictionary",
    "search_session",
    "highlight",
    # Ordering
    "collation_key",
    "compare_words",
    "sort_entries",
    # Loading
    "default_data_dir",
    "load_session_file",
    "load_sessions",
    "load_session_directory",
    "parse_session",
    "check_sources",
    # Exceptions
    "DictionaryViewerError",
    "ValidationError",
    "DataImportError",
    "DuplicateSessionError",
]
