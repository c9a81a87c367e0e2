"""A collection of hittable objects treated as one."""

from __future__ import annotations

from typing import Iterable, Iterator

from .hittable import HitRecord, Hittable
from .interval import Interval
from .ray import Ray


class HittableList(Hittable):
    """Finds the nearest hit among its objects."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest