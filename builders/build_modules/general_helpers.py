# builders.build_modules.general_helpers

import math

from shapely.geometry import Point

# helper functions to find/calculate min/max values
def find_min_y(points):
    min_y = min(pt[1] for pt in points)
    return min_y

def find_max_y(points):
    max_y = max(pt[1] for pt in points)
    return max_y

def find_max_radius(points):
    # horizontal distance from the tower axis (x/z plane)
    max_r = max(math.hypot(pt[0], pt[2]) for pt in points)
    return max_r

def segment_length(start, end) -> float:
    return math.dist(start, end)

# helper function for footprint plots
def create_circle_of_radius(radius: float) -> list[tuple[float, float]]:
        if radius <= 0:
            return [(0.0, 0.0)]
        center_point = Point(0, 0)
        circle = center_point.buffer(radius)
        return list(circle.exterior.coords)
