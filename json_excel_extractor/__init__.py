"""Core logic for the JSON to Excel Data Extractor.

The Gradio UI lives in `app.py`. This package contains the pieces that:
- parse uploaded JSON documents
- resolve dot-path fields against each document
- assemble the rows into a table
- serialize the table to an Excel (or CSV) export
"""
