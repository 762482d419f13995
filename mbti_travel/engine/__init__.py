"""MBTI scoring engine.

Sub-modules:
- scoring    – score accumulation, type resolution, confidence, strength
- validation – answer-set checks and the completeness gate
"""
