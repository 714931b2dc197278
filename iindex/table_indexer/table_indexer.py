import logging
from typing import Dict, List, Optional, Set

import pandas as pd

from iindex.inverted_index.inverted_index import InvertedIndex

logger = logging.getLogger(__name__)

SEARCH_MODES = ("or", "and")


class TableIndexer:
    """
    Builds one in-memory inverted index per text column of a pandas DataFrame
    and returns the rows matching a query.

    Row positions (0..len(df)-1) are used as document IDs, so a hit maps
    directly to ``df.iloc[position]``.

    Attributes:
        df (pd.DataFrame): The indexed frame.
        index_cols (list): Names of the indexed columns.
        indices (dict): Mapping from column name to its InvertedIndex.

    Example:
        >>> import pandas as pd
        >>> df = pd.DataFrame({'title': ['red car', 'blue car'], 'price': [10, 20]})
        >>> ti = TableIndexer(df, ['title'])
        >>> ti.search('red')['price'].tolist()
        [10]
    """

    def __init__(self, df: pd.DataFrame, index_cols: List[str]) -> None:
        """
        Initializes the TableIndexer and indexes every column in `index_cols`.

        Args:
            df: DataFrame holding the rows to search.
            index_cols: Names of text columns to index.

        Raises:
            ValueError: If any column in `index_cols` is missing from the DataFrame.
        """
        self.df = df
        self.index_cols = list(index_cols)
        self._validate_columns()
        self.indices: Dict[str, InvertedIndex] = {}
        self.index()

    def _validate_columns(self) -> None:
        """
        Validates that the DataFrame contains all the columns to index.

        Raises:
            ValueError: If any column is missing from the DataFrame.
        """
        for col in self.index_cols:
            if col not in self.df.columns:
                raise ValueError(f"Missing column in DataFrame: {col}")

    def index(self) -> None:
        """
        Method to build an inverted index for each column in `index_cols`.
        """
        for col in self.index_cols:
            inv_index = InvertedIndex()
            inv_index.index("" if pd.isna(value) else str(value) for value in self.df[col])
            self.indices[col] = inv_index
            logger.debug("Indexed column %r: %s", col, inv_index)

    def search_positions(self, query: str, mode: str = "or") -> List[int]:
        """
        Return the sorted row positions matching `query` in any indexed column.

        Args:
            query: Query text.
            mode: "or" to match any query term, "and" to match all terms within a column.

        Raises:
            ValueError: If `mode` is not one of SEARCH_MODES.
        """
        if mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode '{mode}', expected one of {SEARCH_MODES}")

        positions: Set[int] = set()
        for inv_index in self.indices.values():
            if mode == "or":
                positions |= inv_index.search_or(query)
            else:
                positions |= inv_index.search_and(query)
        return sorted(positions)

    def search(self, query: str, mode: str = "or") -> pd.DataFrame:
        """
        Return the rows matching `query`, in their original order.
        """
        return self.df.iloc[self.search_positions(query, mode=mode)]

    def get_row(self, position: int) -> Optional[pd.Series]:
        if 0 <= position < len(self.df):
            return self.df.iloc[position]
        return None

    def __str__(self) -> str:
        return f"TableIndexer(columns={self.index_cols}, n_rows={len(self.df)})"
