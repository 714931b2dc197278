# Explicitly import submodules to enable tab completion
__version__ = "0.1.0"
from . import inverted_index
from . import table_indexer

# Optional: Shortcut imports for commonly used functions/classes
from .inverted_index.inverted_index import InvertedIndex
from .text_processing.tokenization.tokenizers import tokenizer_func
from .table_indexer.table_indexer import TableIndexer

# List all exposed modules (for documentation and `dir()`)
__all__ = ['inverted_index', 'table_indexer', 'text_processing', 'InvertedIndex', 'TableIndexer', 'tokenizer_func']
