from __future__ import annotations
import logging
from .sample import SAMPLE_TEXT
from .summarize import summarize

def main(sentence_count: int = 2) -> str:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    summary = summarize(SAMPLE_TEXT, sentence_count)
    print("Original text:")
    print(SAMPLE_TEXT)
    print()
    print(f"Summary ({sentence_count} sentences):")
    print(summary)
    return summary

if __name__ == "__main__":
    main()
