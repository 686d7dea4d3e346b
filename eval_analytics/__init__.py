"""
Evaluation Analytics

Scoring core behind the extraction-quality dashboard: expertise-weighted
score blending and the sentiment word cloud layout engine.
"""

__version__ = "1.0.0"
