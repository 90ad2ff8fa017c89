"""Tokenizer, filtering helpers and the sanitizing handler."""
