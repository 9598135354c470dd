"""
Qt GUI for the memorable passphrase generator.

- Preview: a seeded password that updates live as settings change.
- Settings: every generator option, validated through build_config().
- Generate: fills a list from a long-lived maker; entries can be copied
  to the clipboard, which is cleared again after a short delay.
"""

from __future__ import annotations

import logging
import random
import sys
from dataclasses import replace
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from . import config as defaults
from .config import Config, ConfigOptions, build_config, default_padding_length
from .password_maker import PasswordMaker
from .rng import make_rng
from .types import PaddingType, RngType, StrEnum, ValidationError, WordTransformation

logger = logging.getLogger(__name__)

INITIAL_SEED = 13414357264162109690
CLIPBOARD_CLEAR_MS = 15000


def _enum_combo(kind: type[StrEnum]) -> QComboBox:
    combo = QComboBox()
    for name, member in kind.choices():
        combo.addItem(name, member)
        if member.description:
            combo.setItemData(combo.count() - 1, member.description, Qt.ToolTipRole)
    combo.setCurrentText(kind.default().canonical)
    return combo


def _spin(minimum: int, maximum: int, value: int) -> QSpinBox:
    spin = QSpinBox()
    spin.setRange(minimum, maximum)
    spin.setValue(value)
    return spin


class GeneratorWidget(QWidget):
    """
    Settings, preview and generated passwords.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        config = defaults.DEFAULT_CONFIG

        self.maker = PasswordMaker(config, make_rng(config.rng))
        self.maker_rng_kind = config.rng
        self.preview_maker = PasswordMaker(
            replace(config, count=1),
            random.Random(INITIAL_SEED),
            self.maker.wordlist,
        )
        self.seed = INITIAL_SEED

        # Secure clipboard auto-clear
        self._clipboard_token: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_preview_group())
        layout.addWidget(self._build_words_group(config))
        layout.addWidget(self._build_digits_group(config))
        layout.addWidget(self._build_padding_group(config))
        layout.addWidget(self._build_output_group(config))
        layout.addWidget(self._build_status_label())

        self._connect_changes()
        self.refresh_preview()

    # -- groups --

    def _build_preview_group(self) -> QGroupBox:
        group = QGroupBox("Preview")
        layout = QVBoxLayout()

        seed_row = QHBoxLayout()
        self.seed_edit = QLineEdit(str(self.seed))
        self.seed_edit.editingFinished.connect(self.on_seed_edited)
        self.random_seed_button = QPushButton("Random seed")
        self.random_seed_button.clicked.connect(self.on_random_seed_clicked)
        seed_row.addWidget(self.seed_edit, 1)
        seed_row.addWidget(self.random_seed_button)

        self.preview_label = QLabel("")
        preview_font = QFont("Consolas")
        preview_font.setPointSize(13)
        self.preview_label.setFont(preview_font)
        self.preview_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.preview_label.setStyleSheet("color: #f59e0b;")
        self.preview_label.setWordWrap(True)

        layout.addLayout(seed_row)
        layout.addWidget(self.preview_label)
        group.setLayout(layout)
        return group

    def _build_words_group(self, config: Config) -> QGroupBox:
        group = QGroupBox("Words")
        form = QFormLayout()

        self.word_count_spin = _spin(*defaults.WORD_COUNT_RANGE, config.word_count)
        self.word_min_spin = _spin(*defaults.WORD_LENGTH_RANGE, config.word_min_length)
        self.word_max_spin = _spin(
            config.word_min_length, defaults.WORD_LENGTH_RANGE[1], config.word_max_length
        )
        self.transform_combo = _enum_combo(WordTransformation)

        form.addRow("Count", self.word_count_spin)
        form.addRow("Min length", self.word_min_spin)
        form.addRow("Max length", self.word_max_spin)
        form.addRow("Transform", self.transform_combo)
        group.setLayout(form)
        return group

    def _build_digits_group(self, config: Config) -> QGroupBox:
        group = QGroupBox("Digits")
        form = QFormLayout()
        self.digits_before_spin = _spin(*defaults.DIGITS_RANGE, config.digits_before)
        self.digits_after_spin = _spin(*defaults.DIGITS_RANGE, config.digits_after)
        form.addRow("Before", self.digits_before_spin)
        form.addRow("After", self.digits_after_spin)
        group.setLayout(form)
        return group

    def _build_padding_group(self, config: Config) -> QGroupBox:
        group = QGroupBox("Padding and separators")
        form = QFormLayout()
        self.padding_chars_edit = QLineEdit("".join(config.padding_characters))
        self.padding_type_combo = _enum_combo(PaddingType)
        self.padding_length_spin = _spin(
            *defaults.PADDING_LENGTH_RANGE, config.padding_length
        )
        self.separator_chars_edit = QLineEdit("".join(config.separator_characters))

        form.addRow("Padding choices", self.padding_chars_edit)
        form.addRow("Padding type", self.padding_type_combo)
        form.addRow("Padding length", self.padding_length_spin)
        form.addRow("Separator choices", self.separator_chars_edit)
        group.setLayout(form)
        return group

    def _build_output_group(self, config: Config) -> QGroupBox:
        group = QGroupBox("Passwords")
        layout = QVBoxLayout()

        row = QHBoxLayout()
        self.count_spin = _spin(*defaults.COUNT_RANGE, config.count)
        self.rng_combo = _enum_combo(RngType)
        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)

        row.addWidget(QLabel("How many"))
        row.addWidget(self.count_spin)
        row.addWidget(QLabel("RNG"))
        row.addWidget(self.rng_combo)
        row.addStretch()
        row.addWidget(self.generate_button)

        self.password_list = QListWidget()
        list_font = QFont("Consolas")
        list_font.setPointSize(12)
        self.password_list.setFont(list_font)
        self.password_list.itemDoubleClicked.connect(lambda _item: self.copy_to_clipboard())

        self.copy_button = QPushButton("Copy selected")
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        layout.addLayout(row)
        layout.addWidget(self.password_list)
        layout.addWidget(self.copy_button)
        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        return self.status_label

    def _connect_changes(self) -> None:
        for spin in (
            self.word_count_spin,
            self.word_max_spin,
            self.digits_before_spin,
            self.digits_after_spin,
            self.padding_length_spin,
            self.count_spin,
        ):
            spin.valueChanged.connect(self.refresh_preview)
        self.word_min_spin.valueChanged.connect(self.on_min_length_changed)
        self.padding_type_combo.currentIndexChanged.connect(self.on_padding_type_changed)
        self.transform_combo.currentIndexChanged.connect(self.refresh_preview)
        self.rng_combo.currentIndexChanged.connect(self.refresh_preview)
        self.padding_chars_edit.textChanged.connect(self.refresh_preview)
        self.separator_chars_edit.textChanged.connect(self.refresh_preview)

    # -- state --

    def current_options(self) -> ConfigOptions:
        return ConfigOptions(
            count=str(self.count_spin.value()),
            word_count=str(self.word_count_spin.value()),
            word_min_length=str(self.word_min_spin.value()),
            word_max_length=str(self.word_max_spin.value()),
            word_transformation=self.transform_combo.currentText(),
            digits_before=str(self.digits_before_spin.value()),
            digits_after=str(self.digits_after_spin.value()),
            padding_type=self.padding_type_combo.currentText(),
            padding_length=str(self.padding_length_spin.value()),
            padding_characters=self.padding_chars_edit.text(),
            separator_characters=self.separator_chars_edit.text(),
            rng=self.rng_combo.currentText(),
        )

    def _current_config(self) -> Optional[Config]:
        try:
            config = build_config(self.current_options())
        except ValidationError as exc:
            self._set_status(str(exc), error=True)
            return None
        self._set_status("")
        return config

    def _set_status(self, message: str, error: bool = False) -> None:
        self.status_label.setStyleSheet("color: #f87171;" if error else "")
        self.status_label.setText(message)

    # -- actions --

    def refresh_preview(self, *_args) -> None:
        """
        Recompute the preview from the current settings and seed.
        """
        config = self._current_config()
        if config is None:
            return
        self.preview_maker.config = replace(config, count=1)
        self.preview_maker.reseed(self.seed)
        self.preview_label.setText(self.preview_maker.create_password())

    @Slot(int)
    def on_min_length_changed(self, value: int) -> None:
        # max length may never go below min length
        self.word_max_spin.setMinimum(value)
        self.refresh_preview()

    @Slot(int)
    def on_padding_type_changed(self, _index: int) -> None:
        padding_type = self.padding_type_combo.currentData()
        self.padding_length_spin.blockSignals(True)
        self.padding_length_spin.setValue(default_padding_length(padding_type))
        self.padding_length_spin.blockSignals(False)
        self.refresh_preview()

    @Slot()
    def on_seed_edited(self) -> None:
        try:
            self.seed = int(self.seed_edit.text().strip())
        except ValueError:
            self.seed_edit.setText(str(self.seed))
            return
        self.refresh_preview()

    @Slot()
    def on_random_seed_clicked(self) -> None:
        self.seed = self.maker.rng.getrandbits(64)
        self.seed_edit.setText(str(self.seed))
        self.refresh_preview()

    @Slot()
    def on_generate_clicked(self) -> None:
        config = self._current_config()
        if config is None:
            return

        try:
            if config.rng is not self.maker_rng_kind:
                self.maker.rng = make_rng(config.rng)
                self.maker_rng_kind = config.rng
            self.maker.config = config
            passwords = self.maker.create_passwords()
        except Exception as exc:  # noqa: BLE001
            logger.exception("Password generation failed")
            self._set_status(f"Error while generating passwords: {exc}", error=True)
            return

        self.password_list.clear()
        self.password_list.addItems(passwords)
        self._set_status(f"Generated {len(passwords)} password(s) with {config.rng}.")

    def _arm_secure_clipboard(self, owner_tag: str, timeout_ms: int = CLIPBOARD_CLEAR_MS) -> None:
        """
        Start a timer to clear the clipboard after a short interval.

        owner_tag is used so we only clear clipboard content we put there.
        """
        self._clipboard_token = owner_tag
        self._clipboard_timer.start(timeout_ms)

    def _on_clipboard_timeout(self) -> None:
        if not self._clipboard_token:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._clipboard_token:
            cb.clear()
        self._clipboard_token = None
        self._set_status("Clipboard cleared for safety.")

    def copy_to_clipboard(self, *_args) -> None:
        item = self.password_list.currentItem()
        if item is None:
            self._set_status("No password selected. Generate one first.", error=True)
            return

        password = item.text()
        QGuiApplication.clipboard().setText(password)
        self._arm_secure_clipboard(owner_tag=password)
        self._set_status("Password copied to clipboard (auto-clear in a few seconds).")


class PassgenWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("mpgen")
        self.setMinimumSize(420, 760)
        self.resize(460, 820)
        self._apply_base_style()

        self.generator = GeneratorWidget()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.generator)
        self.setCentralWidget(scroll)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit, QSpinBox, QComboBox, QListWidget {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 4px 6px;
                background-color: #050810;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:hover {
                background-color: #020617;
            }
            """
        )


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = PassgenWindow()
    window.show()
    sys.exit(app.exec())
