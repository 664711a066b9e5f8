"""Frame-rate benchmarking with results appended to a CSV file."""

from __future__ import annotations

from pathlib import Path

DEFAULT_RESULTS_FILE = "benchmark_results.csv"
WARMUP_FRAMES = 100
CSV_HEADER = "Implementation,NumBodies,AverageFPS"


class Benchmark:
    """Collects per-frame FPS readings, ignoring the warm-up frames."""

    def __init__(self, implementation: str, num_bodies: int) -> None:
        self.implementation = implementation
        self.num_bodies = num_bodies
        self.total_fps = 0.0
        self.frame_count = 0

    def add_frame(self, fps: float) -> None:
        """Record one frame's FPS; the first frames are counted but not summed."""
        if self.frame_count >= WARMUP_FRAMES:
            self.total_fps += fps
        self.frame_count += 1

    def average_fps(self) -> float:
        """Return the mean FPS after warm-up, or 0.0 if none was recorded."""
        if self.frame_count <= WARMUP_FRAMES:
            return 0.0
        return self.total_fps / (self.frame_count - WARMUP_FRAMES)

    def save_results(self, filename: str | Path = DEFAULT_RESULTS_FILE) -> bool:
        """Append the result row to ``filename``; return False if too few frames.

        A header line is written when the file does not exist yet. Raises
        OSError if the file cannot be opened for appending.
        """
        if self.frame_count <= WARMUP_FRAMES:
            print("Not enough frames recorded for benchmark.")
            return False

        avg = self.average_fps()
        path = Path(filename)
        is_new = not path.exists()
        with path.open("a", encoding="utf-8") as out:
            if is_new:
                out.write(CSV_HEADER + "\n")
            out.write(f"{self.implementation},{self.num_bodies},{avg:.2f}\n")

        print(
            f"Benchmark saved: {self.implementation} with {self.num_bodies} "
            f"bodies, Average FPS: {avg:.2f}"
        )
        return True