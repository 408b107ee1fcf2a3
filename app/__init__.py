# app/__init__.py
"""
ReCal: заметка сейчас — напоминание в календаре потом.
Ядро (offsets, calendar) не зависит от HTTP-слоя (app.api, app.main).
"""
__all__: list[str] = ["config"]
