import logging
from typing import Dict, Iterable, List, Optional, Set

from iindex.text_processing.tokenization.tokenizers import tokenizer_func, get_word_counts

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    An in-memory inverted index that stores documents verbatim and answers
    "any term" (OR) and "all terms" (AND) membership queries.

    Attributes:
        postings (Dict[str, Set[int]]): Mapping from tokens to the IDs of the documents containing them.
        docs (Dict[int, str]): Raw document text by document ID.
        n_docs_seen (int): Number of documents inserted, which is also the next document ID.
    """

    def __init__(self):
        self.postings: Dict[str, Set[int]] = {}
        self.docs: Dict[int, str] = {}
        self.n_docs_seen: int = 0

    def __str__(self) -> str:
        return f"InvertedIndex(n_vocab={len(self.postings)}, n_docs={self.n_docs_seen})"

    def __len__(self) -> int:
        return self.n_docs_seen

    def __contains__(self, doc_id) -> bool:
        return self._is_doc_id(doc_id) and doc_id in self.docs

    @staticmethod
    def _is_doc_id(doc_id) -> bool:
        return isinstance(doc_id, int) and not isinstance(doc_id, bool)

    @property
    def vocabulary(self) -> List[str]:
        return sorted(self.postings)

    def insert_document(self, doc: str) -> int:
        """
        Store a document and add its ID to the posting set of every token it contains.

        Inserting the same text twice creates two documents.

        Args:
            doc: Raw document text. May be empty.

        Returns:
            The ID assigned to the document.

        Example:
            >>> index = InvertedIndex()
            >>> index.insert_document("Hello, World!")
            0
            >>> index.search_or("hello")
            {0}
        """
        doc_id = self.n_docs_seen
        self.docs[doc_id] = doc
        for token in set(tokenizer_func(doc)):
            self.postings.setdefault(token, set()).add(doc_id)
        self.n_docs_seen += 1
        logger.debug("Inserted document %d (%d characters)", doc_id, len(doc))
        return doc_id

    def index(self, docs: Iterable[str]) -> List[int]:
        """
        Insert a sequence of documents in order.

        Args:
            docs: Document strings.

        Returns:
            The IDs assigned to the documents, in insertion order.

        Example:
            >>> index = InvertedIndex()
            >>> index.index(["the quick brown fox", "the lazy dog"])
            [0, 1]
        """
        return [self.insert_document(doc) for doc in docs]

    def get_document(self, doc_id: int) -> Optional[str]:
        """
        Return the stored text of a document, or None if no document has that ID.

        Anything that is not an int (including bool) is never a document ID.
        """
        if not self._is_doc_id(doc_id):
            return None
        return self.docs.get(doc_id)

    def get_postings_for_term(self, term: str) -> Set[int]:
        """
        Return a copy of the posting set for an already normalized term.

        Args:
            term: A token as produced by the tokenizer.

        Returns:
            Set of document IDs, empty if the term was never seen.
        """
        return set(self.postings.get(term, ()))

    def search_postings_for_terms(self, query: str) -> List[Set[int]]:
        """
        Tokenize a query and return the posting set of each term, in query order.
        """
        terms = tokenizer_func(query)
        return [self.get_postings_for_term(term) for term in terms]

    def term_frequencies(self, doc_id: int) -> Dict[str, int]:
        """
        Count how many times each token occurs in a stored document.

        Returns:
            Token counts, empty if the document does not exist.
        """
        doc = self.get_document(doc_id)
        if doc is None:
            return {}
        return dict(get_word_counts(tokenizer_func(doc)))

    def search_or(self, query: str) -> Set[int]:
        """
        Return the documents matching at least one term of the query.

        Unknown terms contribute nothing. An empty query matches nothing.

        Example:
            >>> index = InvertedIndex()
            >>> index.index(["hello world", "hello foo", "world bar"])
            [0, 1, 2]
            >>> sorted(index.search_or("hello world"))
            [0, 1, 2]
        """
        hits: Set[int] = set()
        for term in tokenizer_func(query):
            hits |= self.postings.get(term, set())
        logger.debug("OR query %r matched %d documents", query, len(hits))
        return hits

    def search_and(self, query: str) -> Set[int]:
        """
        Return the documents matching every term of the query.

        A query without terms matches nothing, and so does a query containing
        a term that no document contains.

        Example:
            >>> index = InvertedIndex()
            >>> index.index(["hello world", "hello foo", "world bar"])
            [0, 1, 2]
            >>> index.search_and("hello world")
            {0}
        """
        postings_lists = []
        for term in set(tokenizer_func(query)):
            postings = self.postings.get(term)
            if not postings:
                logger.debug("AND query %r: term %r not indexed", query, term)
                return set()
            postings_lists.append(postings)

        hits = self.intersect_postings(postings_lists)
        logger.debug("AND query %r matched %d documents", query, len(hits))
        return hits

    def intersect_postings(self, postings_lists: List[Set[int]]) -> Set[int]:
        """
        Intersect multiple posting sets to find common document IDs.

        Args:
            postings_lists: List of posting sets. Not modified.

        Returns:
            Intersection of document IDs, empty when the list is empty.
        """
        if not postings_lists:
            return set()

        ordered = sorted(postings_lists, key=len)
        result = set(ordered[0])
        for postings in ordered[1:]:
            if not result:
                break
            result &= postings
        return result
