SAMPLE_TEXT = (
    "Artificial intelligence is transforming the way people work and live. "
    "Machine learning, a branch of artificial intelligence, lets computers learn patterns from data. "
    "Many companies now use machine learning to improve their products and services. "
    "However, artificial intelligence also raises ethical questions about privacy and bias. "
    "Researchers continue to study how artificial intelligence can be developed responsibly."
)
