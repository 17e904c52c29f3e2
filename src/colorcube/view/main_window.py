"""
Main Application Window
=======================
The primary GUI container: a control sidebar on the left and the RGB cube
canvas on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects image sources (presets, files) and the sampling step
   to the sampler, and pushes every new point set into the canvas.
"""
import logging
import os
from typing import Optional

from PySide6.QtCore import QSettings, Qt
from PySide6.QtGui import QAction, QKeySequence, QPixmap
from PySide6.QtWidgets import (
    QButtonGroup, QComboBox, QFileDialog, QFormLayout, QHBoxLayout, QLabel, QMainWindow,
    QMessageBox, QPushButton, QSplitter, QVBoxLayout, QWidget,
)

from colorcube import config
from colorcube.app.application import VISIBLE_APP_NAME
from colorcube.controller.image_loader import (
    ImageLoadError, RgbaImage, array_to_qimage, load_rgba, supported_suffixes,
)
from colorcube.model.presets import make_preset, preset_names
from colorcube.model.sampler import sample_pixels
from colorcube.model.state import ViewState
from colorcube.view.widgets.cube_canvas import CubeCanvas

logger = logging.getLogger(__name__)
SETTINGS_SAMPLING_STEP = "sampling/step"
THUMBNAIL_SIZE = 160


class MainWindow(QMainWindow):
    def __init__(self, initial_path: Optional[str] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 700)

        self._image: Optional[RgbaImage] = None
        self._step: int = self._load_sampling_step()

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        sidebar = QWidget()
        side_layout = QVBoxLayout(sidebar)

        form = QFormLayout()
        self.preset_combo = QComboBox()
        self.preset_combo.addItems(preset_names())
        form.addRow("Preset", self.preset_combo)

        self.btn_open = QPushButton("Open image...")
        form.addRow("", self.btn_open)

        step_row = QHBoxLayout()
        self.step_group = QButtonGroup(self)
        self.step_group.setExclusive(True)
        for label, step in config.SAMPLING_STEPS:
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setToolTip(f"Sample on a {step}x{step} pixel grid")
            btn.setChecked(step == self._step)
            self.step_group.addButton(btn, step)
            step_row.addWidget(btn)
        form.addRow("Sampling", step_row)

        self.point_count_label = QLabel("0")
        form.addRow("Points", self.point_count_label)
        side_layout.addLayout(form)

        self.thumbnail = QLabel()
        self.thumbnail.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        self.thumbnail.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.thumbnail.setStyleSheet("border: 1px solid #888;")
        side_layout.addWidget(self.thumbnail, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.btn_reset = QPushButton("Reset view")
        side_layout.addWidget(self.btn_reset)
        side_layout.addStretch(1)

        splitter.addWidget(sidebar)

        # --- RIGHT SIDE: Cube ---
        self.canvas = CubeCanvas()
        splitter.addWidget(self.canvas)
        splitter.setSizes([260, 840])

        self.view_label = QLabel()
        self.statusBar().addPermanentWidget(self.view_label)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.preset_combo.currentTextChanged.connect(self.on_preset_selected)
        self.btn_open.clicked.connect(self.on_file_open)
        self.step_group.idClicked.connect(self.on_sampling_step_changed)
        self.btn_reset.clicked.connect(self.canvas.reset_view)
        self.canvas.point_count_changed.connect(self.on_point_count_changed)
        self.canvas.view_changed.connect(self.on_view_changed)

        # Initial image
        if initial_path:
            self.open_image(initial_path)
        else:
            self.on_preset_selected(self.preset_combo.currentText())

    def _create_actions(self) -> None:
        self.act_open = QAction("Open Image...", self)
        self.act_open.setShortcut(QKeySequence.StandardKey.Open)
        self.act_open.triggered.connect(self.on_file_open)

        self.act_save_png = QAction("Save View as PNG...", self)
        self.act_save_png.setShortcut("Ctrl+S")
        self.act_save_png.triggered.connect(self.on_save_png)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_reset_view = QAction("Reset View", self)
        self.act_reset_view.setShortcut("R")
        self.act_reset_view.triggered.connect(self.canvas.reset_view)

    def _create_menus(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_save_png)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menubar.addMenu("&View")
        view_menu.addAction(self.act_reset_view)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def sampling_step(self) -> int:
        return self._step

    @property
    def image(self) -> Optional[RgbaImage]:
        return self._image

    def set_image(self, image: RgbaImage) -> None:
        """Show a decoded image and rebuild the point cloud from it."""
        self._image = image
        pixmap = QPixmap.fromImage(array_to_qimage(image.pixels))
        self.thumbnail.setPixmap(
            pixmap.scaled(
                THUMBNAIL_SIZE, THUMBNAIL_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
        self.setWindowTitle(f"{image.name} - {VISIBLE_APP_NAME}")
        self.resample()

    def open_image(self, path: str) -> bool:
        try:
            image = load_rgba(path)
        except ImageLoadError as e:
            logger.error(f"Failed to open image: {e}")
            QMessageBox.critical(self, "Error", f"Could not open image:\n{e}")
            return False
        self.set_image(image)
        return True

    def resample(self) -> None:
        """Sample the current image with the current step and rebuild the view."""
        if self._image is None:
            return
        img = self._image
        point_set = sample_pixels(img.pixels, img.width, img.height, self._step)
        self.canvas.rebuild(point_set)

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    def on_preset_selected(self, name: str) -> None:
        if not name:
            return
        logger.info(f"Loading preset '{name}'")
        self.set_image(RgbaImage(name=name, pixels=make_preset(name)))

    def on_file_open(self) -> None:
        patterns = " ".join(f"*.{s}" for s in supported_suffixes())
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Image", "", f"Images ({patterns});;All Files (*)"
        )
        if path:
            self.open_image(path)

    def on_save_png(self) -> None:
        default_name = "cube.png"
        if self._image is not None:
            default_name = f"{os.path.splitext(self._image.name)[0]}_cube.png"
        path, _ = QFileDialog.getSaveFileName(self, "Save View", default_name, "PNG Images (*.png)")
        if not path:
            return
        if not path.lower().endswith(".png"):
            path += ".png"
        if self.canvas.grab_frame().save(path, "PNG"):
            logger.info(f"Saved view to {path}")
            self.statusBar().showMessage(f"Saved to {path}", 3000)
        else:
            logger.error(f"Failed to save view to {path}")
            QMessageBox.critical(self, "Error", f"Could not save image:\n{path}")

    def on_sampling_step_changed(self, step: int) -> None:
        if step == self._step:
            return
        self._step = step
        QSettings().setValue(SETTINGS_SAMPLING_STEP, step)
        self.resample()

    def on_point_count_changed(self, count: int) -> None:
        self.point_count_label.setText(str(count))

    def on_view_changed(self, view: ViewState) -> None:
        self.view_label.setText(f"pitch {view.rx:+.2f}  yaw {view.ry:+.2f}  zoom {view.zoom:.2f}")

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    @staticmethod
    def _load_sampling_step() -> int:
        valid = {step for _, step in config.SAMPLING_STEPS}
        step = QSettings().value(SETTINGS_SAMPLING_STEP, config.DEFAULT_SAMPLING_STEP, type=int)
        return step if step in valid else config.DEFAULT_SAMPLING_STEP
