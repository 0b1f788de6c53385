# word_index/context/__init__.py
# ingestion side: turning text into tokens for the index

from .tokenizer import ingest_file, iter_file_tokens, tokenize_line

__all__ = [
    "tokenize_line",
    "iter_file_tokens",
    "ingest_file",
]
