"""
Interactive terminal demo for the inverted index.
"""
import argparse
import logging

from iindex.inverted_index.inverted_index import InvertedIndex

SAMPLE_DOCS = [
    "The quick brown fox jumps over the lazy dog",
    "A journey of a thousand miles begins with a single step",
    "To be or not to be, that is the question",
    "All that glitters is not gold",
    "The early bird catches the worm",
]

MENU = """
--- Search Menu ---
1. Search (OR - any token matches)
2. Search (AND - all tokens match)
3. Show document by ID
4. Exit"""


def read_docs(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def print_results(index, results, query, policy):
    if not results:
        if policy == "AND":
            print(f"No documents found matching all tokens in '{query}'")
        else:
            print(f"No documents found matching '{query}'")
        return

    if policy == "AND":
        print(f"\nFound {len(results)} documents matching all tokens in '{query}' (AND search):")
    else:
        print(f"\nFound {len(results)} documents matching '{query}' (OR search):")
    for doc_id in sorted(results):
        print(f"  [{doc_id}] {index.get_document(doc_id)}")


def search_or(index):
    query = input("Enter search query: ").strip()
    print_results(index, index.search_or(query), query, "OR")


def search_and(index):
    query = input("Enter search query: ").strip()
    print_results(index, index.search_and(query), query, "AND")


def show_document(index):
    id_str = input("Enter document ID: ").strip()
    try:
        doc_id = int(id_str)
    except ValueError:
        print("Invalid ID format")
        return

    doc = index.get_document(doc_id)
    if doc is None:
        print(f"Document {doc_id} not found")
    else:
        print(f"\nDocument {doc_id}:\n{doc}")


ACTIONS = {"1": search_or, "2": search_and, "3": show_document}


def run(index):
    """Menu loop. Returns when the user exits or stdin is closed."""
    while True:
        print(MENU)
        try:
            choice = input("\nChoose an option: ").strip()
            if choice == "4":
                print("Goodbye!")
                return
            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid choice. Please try again.")
                continue
            action(index)
        except EOFError:
            print()
            return


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive inverted index demo")
    parser.add_argument("--docs", help="Text file with one document per line (default: built-in samples)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.docs:
        try:
            docs = read_docs(args.docs)
        except OSError as e:
            parser.error(f"cannot read {args.docs}: {e}")
    else:
        docs = SAMPLE_DOCS

    print("=== Inverted Index Demo ===\n")
    index = InvertedIndex()
    print(f"Indexing {len(docs)} documents...\n")
    for doc in docs:
        doc_id = index.insert_document(doc)
        print(f"  Doc {doc_id}: {doc}")

    run(index)
    return 0
