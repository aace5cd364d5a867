from __future__ import annotations
import logging
import re
from typing import List
from .datatypes import Document, Sentence
from .features import inverse_document_frequency, term_frequency, tfidf_vector

logger = logging.getLogger(__name__)

_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+")
_NON_WORD = re.compile(r"[^a-z0-9\s]")

def split_sentences(text: str) -> List[str]:
    # Split on the whitespace run after . ! ? so "..." is a single boundary
    parts = _SENT_SPLIT.split(text)
    return [p.strip() for p in parts if p.strip()]

def tokenize(text: str) -> List[str]:
    """Lowercase, blank out anything but [a-z0-9] and whitespace, split.

    Duplicates are kept so term frequencies can be counted downstream.
    """
    text = _NON_WORD.sub(" ", text.lower())
    return text.split()

def preprocess_text(text: str) -> Document:
    sentences = [
        Sentence(idx=i, text=s, tokens=tokenize(s))
        for i, s in enumerate(split_sentences(text))
    ]
    doc = Document(raw_text=text, sentences=sentences)

    # One IDF map per document, shared read-only by every sentence vector
    idf = inverse_document_frequency([s.tokens for s in doc.sentences])
    for sentence in doc.sentences:
        sentence.tf = term_frequency(sentence.tokens)
        sentence.tf_idf_vector = tfidf_vector(sentence.tf, idf)

    logger.debug("preprocessed %d sentences, %d distinct terms", len(doc.sentences), len(idf))
    return doc
