# MIT License (see LICENSE)
"""
Renderer adapters for particle-life visualization.

A renderer reads each particle's position, the display scale and its
family color; it never writes simulation state. The engine has no
graphics dependency, so these adapters are the seam a window/render loop
plugs into.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Color, Particle

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.time)
        for p in sim.particles:
            renderer.draw_particle(p, sim.particle_color(p), sim.config.particle_scale)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle, color: Color, scale: float) -> None:
        """
        Draw a single particle.

        Args:
            particle: The particle to draw. Must not be modified.
            color: RGB color of the particle's family.
            scale: Display diameter in world units.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """Draw every particle of a simulation as one frame."""
        scale = sim.config.particle_scale
        self.begin_frame(sim.time)
        for p, color in zip(sim.particles, sim.colors_for_particles()):
            self.draw_particle(p, color, scale)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle.

    Output:
        === Frame t=0.0167 ===
        [1] family=0 @ (-412.30, 88.02) v=(0.00, 0.00) rgb=(0.12, 0.80, 0.45)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_particle(self, particle: Particle, color: Color, scale: float) -> None:
        pos = particle.position
        line = f"[{particle.id}] family={particle.family} @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel = particle.velocity
            r, g, b = color
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f}) rgb=({r:.2f}, {g:.2f}, {b:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for headless runs and benchmarks."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_particle(self, particle: Particle, color: Color, scale: float) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames as plain dicts.

    Positions are copied, so later steps do not alter recorded frames.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)
        print(len(renderer.frames[-1]["particles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "particles": []}

    def draw_particle(self, particle: Particle, color: Color, scale: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "id": particle.id,
            "family": particle.family,
            "position": particle.position.tolist(),
            "color": list(color),
            "scale": scale,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
