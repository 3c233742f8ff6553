"""
Scan Classifier.

Recognizes text in a photographed document and classifies it with a local,
frozen bag-of-words neural network:

- OCR (Tesseract) turns the photo into text
- Text is normalized into lowercase alphanumeric tokens
- Tokens are counted into a fixed-size feature vector
- A TFLite model scores the vector; the arg-max label is the prediction

Architecture: FastAPI service + TFLite inference + pytesseract OCR
"""

__version__ = "0.1.0"
