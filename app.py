"""Launcher for ``streamlit run app.py`` from the repository root."""

from artwork_gallery.app import main

main()
