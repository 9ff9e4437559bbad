"""GUI control panel using tkinter."""

import logging
import tkinter as tk
from tkinter import ttk, messagebox, colorchooser
from typing import Dict, Optional, Tuple

from galaxy_points.backends.factory import get_backend, list_available_backends
from galaxy_points.errors import GalaxyError
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.colors import color_to_hex
from galaxy_points.generator.parameters import (
    COLOR_FIELDS,
    PANEL_LABELS,
    PANEL_RANGES,
    GalaxyParameters,
    snap_to_panel,
)
from galaxy_points.generator.session import GalaxySession
from galaxy_points.render.renderer_3d import PointCloudRenderer
from galaxy_points.utils.reproducibility import fresh_seed, parse_seed

logger = logging.getLogger(__name__)


class GalaxyPointsGUI:
    """Parameter panel; the galaxy itself is shown in a matplotlib window."""

    def __init__(self, root):
        self.root = root
        self.root.title("Galaxy Points")
        self.root.geometry("460x560")

        self.session: Optional[GalaxySession] = None
        self.renderer: Optional[PointCloudRenderer] = None
        self.slider_vars: Dict[str, tk.DoubleVar] = {}
        self.colors: Dict[str, str] = {}
        self.swatches: Dict[str, tk.Label] = {}
        self._settings: Optional[Tuple[str, str]] = None

        self._create_widgets()
        self._setup_layout()

    def _create_widgets(self):
        """Create GUI widgets."""
        defaults = GalaxyParameters()
        self.control_frame = ttk.LabelFrame(self.root, text="Galaxy", padding=10)

        row = 0
        for name, (low, high, _) in PANEL_RANGES.items():
            ttk.Label(self.control_frame, text=f"{PANEL_LABELS[name]}:").grid(row=row, column=0, sticky='w', pady=5)
            var = tk.DoubleVar(value=getattr(defaults, name))
            scale = ttk.Scale(self.control_frame, from_=low, to=high,
                              variable=var, orient='horizontal', length=200)
            scale.grid(row=row, column=1, pady=5)
            value_label = ttk.Label(self.control_frame, text=str(getattr(defaults, name)), width=9)
            value_label.grid(row=row, column=2, pady=5)
            scale.configure(command=lambda v, n=name, lbl=value_label: lbl.config(text=str(snap_to_panel(n, float(v)))))
            # Regenerate only once the drag is finished
            scale.bind("<ButtonRelease-1>", self._on_finish_change)
            self.slider_vars[name] = var
            row += 1

        for name in COLOR_FIELDS:
            hex_value = color_to_hex(getattr(defaults, name))
            self.colors[name] = hex_value
            ttk.Button(self.control_frame, text=PANEL_LABELS[name],
                       command=lambda n=name: self._pick_color(n)).grid(row=row, column=0, sticky='ew', pady=5)
            swatch = tk.Label(self.control_frame, background=hex_value, width=12, relief='sunken')
            swatch.grid(row=row, column=1, sticky='w', pady=5)
            self.swatches[name] = swatch
            row += 1

        # Backend selection
        ttk.Label(self.control_frame, text="Backend:").grid(row=row, column=0, sticky='w', pady=5)
        self.backend_var = tk.StringVar(value="numpy")
        backend_combo = ttk.Combobox(self.control_frame, textvariable=self.backend_var,
                                     values=list_available_backends(), state="readonly", width=15)
        backend_combo.grid(row=row, column=1, sticky='w', pady=5)
        backend_combo.bind("<<ComboboxSelected>>", self._on_finish_change)
        row += 1

        # Seed
        ttk.Label(self.control_frame, text="Seed:").grid(row=row, column=0, sticky='w', pady=5)
        self.seed_var = tk.StringVar(value="")
        seed_entry = ttk.Entry(self.control_frame, textvariable=self.seed_var, width=18)
        seed_entry.grid(row=row, column=1, sticky='w', pady=5)
        seed_entry.bind("<Return>", self._on_finish_change)
        row += 1

        self.generate_button = ttk.Button(self.control_frame, text="Generate", command=self.initialize)
        self.generate_button.grid(row=row, column=0, columnspan=3, pady=10, sticky='ew')
        row += 1

        self.status_label = ttk.Label(self.control_frame, text="Ready", foreground="green")
        self.status_label.grid(row=row, column=0, columnspan=3, pady=10)

    def _setup_layout(self):
        """Setup window layout."""
        self.control_frame.pack(side='left', fill='both', expand=True, padx=10, pady=10)

    def _current_parameters(self) -> Dict:
        changes = {name: snap_to_panel(name, var.get()) for name, var in self.slider_vars.items()}
        changes.update(self.colors)
        return changes

    def _pick_color(self, name: str):
        _, hex_value = colorchooser.askcolor(color=self.colors[name], title=PANEL_LABELS[name])
        if hex_value is None:
            return
        self.colors[name] = hex_value
        self.swatches[name].config(background=hex_value)
        self._on_finish_change()

    def _session_settings(self) -> Tuple[str, str]:
        return self.backend_var.get(), self.seed_var.get().strip()

    def _on_finish_change(self, event=None):
        """Commit the edited parameters and regenerate.

        A new backend or seed starts a fresh session; other edits regenerate
        the current one.
        """
        if self.session is None or self._session_settings() != self._settings:
            self.initialize()
            return
        try:
            self.session.update(**self._current_parameters())
        except GalaxyError as e:
            self.status_label.config(text="Invalid parameters", foreground="red")
            messagebox.showerror("Error", str(e))

    def _on_replace(self, old: Optional[ParticleBuffer], new: ParticleBuffer):
        # The renderer drops the previous scatter when it draws the new one
        self.renderer.render(new, particle_size=self.session.params.particle_size)
        self.status_label.config(
            text=f"Generation {self.session.generation}: {len(new)} stars",
            foreground="green"
        )

    def initialize(self):
        """Start a new session from the panel state."""
        try:
            seed = parse_seed(self.seed_var.get())
        except ValueError:
            messagebox.showerror("Error", "Seed must be a non-negative integer")
            return
        if seed is None:
            seed = fresh_seed()
        logger.info("Starting session with seed %d", seed)

        try:
            params = GalaxyParameters(**self._current_parameters())
            backend = get_backend(self.backend_var.get())
        except (GalaxyError, ValueError) as e:
            messagebox.showerror("Error", f"Failed to initialize: {e}")
            return

        if self.renderer is None:
            self.renderer = PointCloudRenderer(title="Galaxy")
        self.session = GalaxySession(params, rng=seed, backend=backend, on_replace=self._on_replace)
        self._settings = self._session_settings()
        try:
            self.session.regenerate()
        except GalaxyError as e:
            messagebox.showerror("Error", f"Failed to generate: {e}")

    def close(self):
        if self.renderer is not None:
            self.renderer.close()
            self.renderer = None
        self.root.destroy()


def run_gui():
    """Run GUI application."""
    root = tk.Tk()
    app = GalaxyPointsGUI(root)
    root.protocol("WM_DELETE_WINDOW", app.close)
    root.after(100, app.initialize)
    root.mainloop()


if __name__ == '__main__':
    run_gui()
