
import sys
import os
import logging
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QPushButton, QLabel, QLineEdit, QGroupBox,
                               QCheckBox, QColorDialog)
from PySide6.QtCore import Qt, QSignalBlocker
from PySide6.QtGui import QColor

from styles import STYLESHEET
from color_logic import format_rgb, format_hsl, rgb_to_hex
from color_sync import ColorSyncController, Authority
from icon_gen import create_app_icon
from settings import load_settings, save_settings, SETTINGS_FILE
from widgets import ChannelSlider, ColorSwatch

logger = logging.getLogger(__name__)


class ColorSyncWindow(QMainWindow):
    """
    Hex / RGB / HSL editor. Widgets only forward edits to the controller and
    render what it publishes.
    """
    def __init__(self, controller=None, settings=None, settings_path=SETTINGS_FILE):
        super().__init__()
        self.setWindowTitle("Color Sync")
        self.setFixedWidth(560)

        self.settings_path = settings_path
        self.app_settings = settings if settings is not None else load_settings(settings_path)
        self.controller = controller or ColorSyncController(self.app_settings["default_hex"])
        self.icon_hex = None

        self.setup_ui()
        self.apply_window_flags()

        self.controller.subscribe(self.render_snapshot)
        self.render_snapshot(self.controller.get_snapshot())

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(12)
        main_layout.setContentsMargins(12, 12, 12, 12)

        # --- Preview ---
        preview_row = QHBoxLayout()
        preview_row.setSpacing(12)

        self.preview = ColorSwatch(self.controller.get_snapshot().hex)
        self.preview.setObjectName("PreviewFrame")
        self.preview.setFixedSize(120, 120)
        preview_row.addWidget(self.preview)

        info_layout = QVBoxLayout()
        info_layout.setSpacing(2)
        self.hex_lbl = QLabel()
        self.hex_lbl.setObjectName("BigHexLabel")
        self.rgb_lbl = QLabel()
        self.rgb_lbl.setObjectName("CodeLabel")
        self.hsl_lbl = QLabel()
        self.hsl_lbl.setObjectName("CodeLabel")
        for lbl in (self.hex_lbl, self.rgb_lbl, self.hsl_lbl):
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
            info_layout.addWidget(lbl)
        info_layout.addStretch()

        self.aot_toggle = QCheckBox("Always on top")
        self.aot_toggle.setChecked(self.app_settings.get("always_on_top", False))
        self.aot_toggle.toggled.connect(self.on_always_on_top_toggled)
        info_layout.addWidget(self.aot_toggle)

        preview_row.addLayout(info_layout, 1)
        main_layout.addLayout(preview_row)

        # --- HEX ---
        hex_group = QGroupBox("HEX")
        hex_layout = QHBoxLayout(hex_group)
        self.hex_edit = QLineEdit()
        self.hex_edit.setMaxLength(7)
        self.hex_edit.setPlaceholderText("#000000")
        self.hex_edit.textEdited.connect(self.controller.edit_hex)
        hex_layout.addWidget(self.hex_edit, 1)

        self.pick_btn = QPushButton("Pick…")
        self.pick_btn.setCursor(Qt.PointingHandCursor)
        self.pick_btn.clicked.connect(self.open_color_dialog)
        hex_layout.addWidget(self.pick_btn)
        main_layout.addWidget(hex_group)

        # --- RGB ---
        rgb_group = QGroupBox("RGB")
        rgb_layout = QVBoxLayout(rgb_group)
        self.rgb_sliders = {}
        for channel, title in (("r", "Red"), ("g", "Green"), ("b", "Blue")):
            slider = ChannelSlider(title, 255)
            slider.valueEdited.connect(lambda v, c=channel: self.controller.edit_rgb(c, v))
            rgb_layout.addWidget(slider)
            self.rgb_sliders[channel] = slider
        main_layout.addWidget(rgb_group)

        # --- HSL ---
        hsl_group = QGroupBox("HSL")
        hsl_layout = QVBoxLayout(hsl_group)
        self.hsl_sliders = {}
        for channel, title, maximum, suffix in (("h", "Hue", 359, "°"),
                                                ("s", "Saturation", 100, "%"),
                                                ("l", "Lightness", 100, "%")):
            slider = ChannelSlider(title, maximum, suffix)
            slider.valueEdited.connect(lambda v, c=channel: self.controller.edit_hsl(c, v))
            hsl_layout.addWidget(slider)
            self.hsl_sliders[channel] = slider
        main_layout.addWidget(hsl_group)

        main_layout.addStretch()

    def render_snapshot(self, snapshot):
        r, g, b = snapshot.rgb
        # The hex field may hold partial text; show the last valid color instead
        color_hex = rgb_to_hex(r, g, b)

        self.preview.set_color(color_hex)
        self.hex_lbl.setText(color_hex)
        self.rgb_lbl.setText(format_rgb(snapshot.rgb))
        self.hsl_lbl.setText(format_hsl(snapshot.hsl))
        if color_hex != self.icon_hex:
            self.icon_hex = color_hex
            self.setWindowIcon(create_app_icon(color_hex))

        # Don't rewrite the line edit under the user's cursor
        if snapshot.authority != Authority.HEX or self.hex_edit.text() != snapshot.hex:
            blocker = QSignalBlocker(self.hex_edit)
            self.hex_edit.setText(snapshot.hex)
            blocker.unblock()

        for channel, value in zip("rgb", snapshot.rgb):
            self.rgb_sliders[channel].set_value(value)
        for channel, value in zip("hsl", snapshot.hsl):
            self.hsl_sliders[channel].set_value(value)

    def open_color_dialog(self):
        r, g, b = self.controller.get_snapshot().rgb
        color = QColorDialog.getColor(QColor(r, g, b), self, "Pick a color")
        if color.isValid():
            self.controller.edit_hex(color.name().upper())

    def apply_window_flags(self):
        current = self.windowFlags()
        new_flags = current
        if self.app_settings.get("always_on_top", False):
            new_flags |= Qt.WindowStaysOnTopHint
        else:
            new_flags &= ~Qt.WindowStaysOnTopHint

        if new_flags != current:
            visible = self.isVisible()
            self.setWindowFlags(new_flags)
            if visible:
                self.show()

    def on_always_on_top_toggled(self, checked):
        self.app_settings["always_on_top"] = checked
        save_settings(self.app_settings, self.settings_path)
        self.apply_window_flags()

    def closeEvent(self, event):
        self.controller.unsubscribe(self.render_snapshot)
        super().closeEvent(event)


def main():
    level = logging.DEBUG if os.environ.get("COLOR_SYNC_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = ColorSyncWindow()
    logger.info("Starting with %s", window.controller.get_snapshot().hex)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
