"""
scoring/: score blending and accuracy sub-scores

Modules:
    utils.py              - Float clamp, weighted mean, camelCase records
    score_blender.py      - Expertise-weighted blend of automated score and user rating
    expertise.py          - Role multipliers and evaluator expertise weights
    component_scores.py   - Metadata / research-field sub-scores, balanced overall score
"""
