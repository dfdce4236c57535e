"""
Classifies pasted JSON documents for quantitative experimental data using Gemini.
"""
