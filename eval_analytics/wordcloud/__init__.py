"""
wordcloud/: sentiment word cloud

Modules:
    sentiment.py        - Lexicon sentiment tagger for comments
    word_extractor.py   - Comments → WordEntry frequency table
    layout.py           - Spiral / grid / bubble / wave placement
"""
