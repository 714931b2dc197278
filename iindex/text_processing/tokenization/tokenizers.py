from collections import defaultdict
import regex

# anything that is neither alphabetic, numeric nor whitespace becomes a separator
separator_pattern = r'[^\p{Alphabetic}\p{N}\p{White_Space}]'
separator = regex.compile(separator_pattern)

def tokenizer_func(x):
    return separator.sub(' ', x.lower()).split()

def get_word_counts(words):
    counts = defaultdict(int)  # int() returns 0 by default
    for word in words:
        counts[word] += 1
    return counts
