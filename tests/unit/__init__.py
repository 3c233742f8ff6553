"""
Unit tests for Scan Classifier.

Test individual components in isolation:
- Text normalizer, vectorizer and label selector
- Classification pipeline (with a deterministic linear engine)
- Artifact loaders (vocabulary fallbacks, fatal label errors)
- Inference engines (size checks, close-once, mocked interpreter)
- OCR engine (mocked pytesseract)
- API dependencies and models
"""
