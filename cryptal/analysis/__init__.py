"""
Analysis engine: turns a market snapshot and price history into an
explainable risk assessment.

Modules
-------
fundamental  : score_fundamentals() + classify_risk() — weighted 0–100 score
               with per-factor explanations. Pure, no I/O.
technical    : analyze_technicals() + InsufficientDataError — moving averages,
               log-return volatility, support/resistance. Pure, no I/O.
synthesizer  : synthesize() — ordered suggestions plus disclaimer. Pure.
narratives   : static text catalog used by the three modules above.
orchestrator : assess_asset() — runs the components for one asset.
"""
