"""
Board renderer: draws a GameView to a PIL image with matplotlib.
"""

from collections import OrderedDict
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np
from PIL import Image

from .board import PEG_LABELS, state_key
from .controller import GameView

DISK_COLORS = [
    '#EF4444', '#F97316', '#EAB308', '#22C55E', '#14B8A6', '#3B82F6',
    '#6366F1', '#A855F7', '#EC4899', '#F43F5E', '#06B6D4', '#84CC16',
]

HIGHLIGHT_COLORS = {
    "selected": '#3B82F6',
    "hint_from": '#FACC15',
    "hint_to": '#22D3EE',
    "goal": 'green',
}


class BoardRenderer:
    """
    Render board snapshots as RGB images.

    Rendered images are kept in a small LRU cache keyed by board and
    highlights, since auto-solve playback revisits few distinct frames.
    """

    def __init__(self, image_size: Tuple[int, int] = (768, 432), cache_size: int = 64):
        self.image_size = image_size
        self._cache: "OrderedDict[tuple, Image.Image]" = OrderedDict()
        self._cache_max = cache_size

    def _highlights(self, view: GameView) -> Dict[int, str]:
        marks: Dict[int, str] = {}
        if view.selected_peg is not None:
            marks[view.selected_peg] = HIGHLIGHT_COLORS["selected"]
        if view.hint is not None:
            marks[view.hint[0]] = HIGHLIGHT_COLORS["hint_from"]
            marks[view.hint[1]] = HIGHLIGHT_COLORS["hint_to"]
        return marks

    def render(self, view: GameView) -> Image.Image:
        """Render `view` as an RGB image of `image_size` pixels."""
        highlights = self._highlights(view)
        cache_key = (view.disk_count, state_key(view.board), view.target_peg,
                     tuple(sorted(highlights.items())))
        cached = self._cache.get(cache_key)
        if cached is not None:
            self._cache.move_to_end(cache_key)
            return cached

        width, height = self.image_size
        fig, ax = plt.subplots(figsize=(width/100, height/100), dpi=100)

        peg_x = [width * 0.2, width * 0.5, width * 0.8]
        column_width = width * 0.28

        # Base platform
        base_height = height * 0.06
        ax.add_patch(Rectangle(
            (width * 0.03, 0),
            width * 0.94,
            base_height,
            facecolor='#92400E',
            edgecolor='none',
            linewidth=0
        ))

        # Disk height shrinks so twelve disks still fit under the peg tops
        peg_height = height * 0.75
        disk_height = min(height * 0.08, peg_height / (view.disk_count + 1))

        # Peg highlights, goal box, then pegs
        for idx, color in highlights.items():
            ax.add_patch(Rectangle(
                (peg_x[idx] - column_width/2, base_height),
                column_width,
                peg_height + disk_height * 0.5,
                facecolor=color,
                alpha=0.2,
                edgecolor=color,
                linewidth=2
            ))
        ax.add_patch(Rectangle(
            (peg_x[view.target_peg] - column_width/2, base_height),
            column_width,
            peg_height + disk_height * 0.5,
            fill=False,
            edgecolor=HIGHLIGHT_COLORS["goal"],
            linewidth=2,
            linestyle='--'
        ))

        peg_width = width * 0.012
        for x in peg_x:
            ax.add_patch(Rectangle(
                (x - peg_width/2, base_height),
                peg_width,
                peg_height,
                facecolor='#B45309',
                edgecolor='none',
                linewidth=0
            ))

        # Disks: width interpolates between 40% and 95% of the column
        for peg_idx, peg in enumerate(view.board):
            for level, disk in enumerate(peg):
                disk_width = column_width * (0.4 + 0.55 * disk / view.disk_count)
                x = peg_x[peg_idx] - disk_width / 2
                y = base_height + level * disk_height
                ax.add_patch(Rectangle(
                    (x, y),
                    disk_width,
                    disk_height * 0.9,
                    facecolor=DISK_COLORS[(disk - 1) % len(DISK_COLORS)],
                    edgecolor='black',
                    linewidth=1.5
                ))
                if disk_height >= 12:
                    ax.text(
                        peg_x[peg_idx], y + disk_height * 0.45, str(disk),
                        ha='center', va='center',
                        fontsize=max(6, int(disk_height * 0.5)),
                        color='white', fontweight='bold'
                    )

        # Labels
        label_y = -height * 0.03
        for i, (x, label) in enumerate(zip(peg_x, PEG_LABELS)):
            is_goal = i == view.target_peg
            ax.text(
                x, label_y, f"Peg {label}",
                ha='center', va='top',
                fontsize=max(10, width // 50),
                color='green' if is_goal else 'black',
                fontweight='bold' if is_goal else 'normal'
            )

        ax.set_xlim(0, width)
        ax.set_ylim(-height * 0.1, height)
        ax.set_aspect('equal')
        ax.axis('off')

        # Convert to PIL Image
        fig.canvas.draw()
        buf = np.frombuffer(fig.canvas.buffer_rgba(), dtype=np.uint8)
        canvas_width, canvas_height = fig.canvas.get_width_height()
        buf = buf.reshape((canvas_height, canvas_width, 4))[:, :, :3]
        plt.close(fig)

        out = Image.fromarray(buf).convert("RGB")

        self._cache[cache_key] = out
        self._cache.move_to_end(cache_key)
        while len(self._cache) > self._cache_max:
            self._cache.popitem(last=False)

        return out

    def save(self, view: GameView, path: Union[str, Path], fmt: Optional[str] = None) -> Path:
        """Render `view` and write it to `path` (PNG unless `fmt` says otherwise)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(view).save(path, format=fmt or "PNG")
        return path
