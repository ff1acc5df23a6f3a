"""
Unit Tests for fen2png

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_decoder.py

    # Run with coverage
    pytest tests/ --cov=fen2png --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
    - chess: independent FEN reference for round-trip checks

No test needs the Merida font: rasterizer tests mock the drawing layer.
"""
