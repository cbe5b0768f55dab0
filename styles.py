STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

/* Labels */
QLabel {
    color: #e0e0e0;
}

QLabel#BigHexLabel {
    font-family: monospace;
    font-size: 22px;
    font-weight: bold;
    color: #ffffff;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 13px;
    color: #aaaaaa;
}

QLabel#ChannelLabel {
    font-size: 13px;
    color: #aaaaaa;
}

QLabel#ChannelValue {
    font-family: monospace;
    font-size: 13px;
    color: #ffffff;
}

/* Buttons */
QPushButton {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 6px 12px;
    font-weight: bold;
    color: #e0e0e0;
}

QPushButton:hover {
    background-color: #2c2c2c;
    border-color: #444444;
}

QPushButton:pressed {
    background-color: #383838;
}

/* Hex input */
QLineEdit {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 6px;
    font-family: monospace;
    color: #ffffff;
}

QLineEdit:focus {
    border-color: #666666;
}

/* Color Swatches */
QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QFrame#PreviewFrame {
    border: 1px solid #333333;
    border-radius: 10px;
}

/* Groups */
QGroupBox {
    border: 1px solid #333333;
    border-radius: 6px;
    margin-top: 8px;
    padding-top: 8px;
    color: #e0e0e0;
}
QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 5px;
    color: #aaaaaa;
}

/* Sliders */
QSlider::groove:horizontal {
    height: 6px;
    background: #333333;
    border-radius: 3px;
}
QSlider::handle:horizontal {
    background: #ffffff;
    width: 14px;
    margin: -5px 0;
    border-radius: 7px;
}
QSlider::handle:horizontal:hover {
    background: #dddddd;
}

QCheckBox {
    color: #aaaaaa;
}
"""
