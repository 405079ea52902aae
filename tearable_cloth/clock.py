class FixedStepClock:
    """Fixed-timestep accumulator: converts variable frame times into whole ticks of ``dt``."""

    def __init__(self, dt=1.0 / 60.0, max_frame_time=0.25):
        if not dt > 0.0:
            raise ValueError(f"dt must be > 0, got {dt!r}")
        self.dt = float(dt)
        self.max_frame_time = float(max_frame_time)
        self.accumulator = 0.0

    def advance(self, frame_time):
        """Add one frame's elapsed time; returns how many fixed ticks are due."""
        frame_time = min(max(0.0, float(frame_time)), self.max_frame_time)
        self.accumulator += frame_time
        steps = 0
        while self.accumulator >= self.dt:
            self.accumulator -= self.dt
            steps += 1
        return steps

    @property
    def alpha(self):
        return self.accumulator / self.dt

    def reset(self):
        self.accumulator = 0.0
