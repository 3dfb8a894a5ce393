"""Voicing Engine — ergonomic chord voicings for fretted instruments.

Sub-package containing:
    voicing        – immutable data model (candidates, voicings, results)
    tuning         – open-string pitches and tuning presets
    candidates     – per-string candidate map
    search         – depth-first assignment search with pruning
    cost_model     – ergonomic cost components and weights
    ranker         – dedupe, order and cap scored voicings
    generator      – public generate_voicings pipeline
    voice_leading  – movement between voicings
    progression    – greedy voice-leading across a chord sequence
    voicing_utils  – labels and summaries for display
"""
