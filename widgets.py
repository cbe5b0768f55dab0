from PySide6.QtWidgets import QWidget, QLabel, QFrame, QHBoxLayout, QSlider
from PySide6.QtCore import Qt, Signal, QSignalBlocker


class ColorSwatch(QFrame):
    """
    A frame painted with a single color.
    """
    def __init__(self, color_hex, parent=None):
        super().__init__(parent)
        self.setObjectName("Swatch")
        self.color_hex = None
        self.set_color(color_hex)

    def set_color(self, color_hex):
        if color_hex == self.color_hex:
            return
        self.color_hex = color_hex
        self.setStyleSheet(f"background-color: {color_hex};")


class ChannelSlider(QWidget):
    """
    Label + slider + value readout for one color channel.

    valueEdited only fires for user interaction; set_value() is silent so the
    window can render a snapshot without feeding it back into the controller.
    """
    valueEdited = Signal(int)

    def __init__(self, title, maximum, suffix="", parent=None):
        super().__init__(parent)
        self.suffix = suffix

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.title_lbl = QLabel(title)
        self.title_lbl.setObjectName("ChannelLabel")
        self.title_lbl.setFixedWidth(80)
        layout.addWidget(self.title_lbl)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, maximum)
        self.slider.setCursor(Qt.PointingHandCursor)
        self.slider.valueChanged.connect(self.on_slider_changed)
        layout.addWidget(self.slider, 1)

        self.value_lbl = QLabel()
        self.value_lbl.setObjectName("ChannelValue")
        self.value_lbl.setFixedWidth(50)
        self.value_lbl.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.value_lbl)

        self.update_value_label(self.slider.value())

    def set_value(self, value):
        blocker = QSignalBlocker(self.slider)
        self.slider.setValue(value)
        blocker.unblock()
        self.update_value_label(value)

    def update_value_label(self, value):
        self.value_lbl.setText(f"{value}{self.suffix}")

    def on_slider_changed(self, value):
        self.update_value_label(value)
        self.valueEdited.emit(value)
