"""Centralized Qt stylesheets for the application."""

from .color_palette import ColorPalette, ToneColors


class Styles:
    """Helper class to generate Qt stylesheets."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QFrame#card {{
                background-color: {ColorPalette.CARD_BACKGROUND};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 10px;
            }}
            QPushButton {{
                background-color: {ColorPalette.CARD_BACKGROUND};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 6px;
                padding: 10px 14px;
                text-align: left;
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT_PRIMARY};
                color: {ColorPalette.ACCENT_TEXT};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY};
            }}
            QPushButton#primary {{
                background-color: {ColorPalette.ACCENT_PRIMARY};
                color: {ColorPalette.ACCENT_TEXT};
                text-align: center;
                font-weight: bold;
            }}
            QPushButton#primary:disabled {{
                background-color: {ColorPalette.BORDER_PRIMARY};
            }}
            QListWidget {{
                background-color: {ColorPalette.CARD_MUTED};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 6px;
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_badge_style() -> str:
        return (
            f"background-color: {ColorPalette.CARD_MUTED}; color: {ColorPalette.TEXT_SECONDARY};"
            " border-radius: 8px; padding: 2px 8px; font-size: 11px;"
        )

    @staticmethod
    def get_timer_style(low_time: bool) -> str:
        color = ColorPalette.ERROR.text if low_time else ColorPalette.INFO.text
        return f"font-size: 16pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_stat_tile_style(tone: ToneColors) -> str:
        return (
            f"background-color: {tone.background}; color: {tone.text};"
            " border-radius: 8px; padding: 12px; font-weight: bold;"
        )

    @staticmethod
    def get_score_style(tone: ToneColors) -> str:
        return f"font-size: 32pt; font-weight: bold; color: {tone.text};"
