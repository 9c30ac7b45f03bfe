from dataclasses import dataclass


@dataclass
class Scale:
    name: str
    vertices: int
    edges: int
    # single-edge add/remove calls per mutation benchmark
    mutations: int


SCALES = {
    "tiny":   Scale("tiny", 100, 400, 100),
    "small":  Scale("small", 1_000, 5_000, 500),
    "medium": Scale("medium", 10_000, 50_000, 2_000),
    "large":  Scale("large", 100_000, 500_000, 5_000),
}
