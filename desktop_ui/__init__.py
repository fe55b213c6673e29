"""PySide6 + QML desktop shell for the starter selection screen."""
