# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to try out the geometry kernel.
"""

import os

from planartopo import GeometryFactory, PrecisionModel, geometry_sort_key
from planartopo.utils.helpers import box, geometry_summary, regular_polygon, square


def run_example(output_dir="output"):
    """Run Example."""
    os.makedirs(output_dir, exist_ok=True)

    factory = GeometryFactory(srid=4326)

    print("Building sample geometries...")
    rectangle = box(factory, 0, 0, 10, 10)
    point = factory.create_point((5, 5))
    left = square(factory, 0, 0, 1)
    right = square(factory, 2, 0, 1)
    horizontal = factory.create_line_string([(0, 0), (2, 2)])
    vertical = factory.create_line_string([(0, 2), (2, 0)])
    circle = regular_polygon(factory, (5, 5), 3, sides=32)

    print(f"Rectangle: {rectangle!r} (is_rectangle={rectangle.is_rectangle})")
    print(f"Envelope of circle: {circle.envelope_internal}")

    print("\nEvaluating predicates...")
    print(f"  rectangle contains point: {rectangle.contains(point)}")
    print(f"  point within rectangle: {point.within(rectangle)}")
    print(f"  rectangle covers circle: {rectangle.covers(circle)}")
    print(f"  squares intersect: {left.intersects(right)}")
    print(f"  lines cross: {horizontal.crosses(vertical)}")
    print(f"  relate(lines): {horizontal.relate(vertical)}")

    print("\nRunning overlays...")
    crossing = horizontal.intersection(vertical)
    print(f"  crossing lines meet at: {crossing!r}")
    print(f"  disjoint squares intersection: {left.intersection(right)!r}")
    print(f"  union of squares has area {left.union(right).area:.2f}")
    print(f"  rectangle minus circle has area {rectangle.difference(circle).area:.2f}")

    print("\nBuffers and derived measures...")
    empty_line = factory.create_line_string()
    print(f"  buffer of empty line: {empty_line.buffer(1.0)!r}")
    print(f"  centroid of circle: {circle.centroid()!r}")
    print(f"  interior point of rectangle: {rectangle.interior_point()!r}")
    print(f"  distance between squares: {left.distance(right):.2f}")

    print("\nSnapping to a fixed precision grid...")
    fixed = GeometryFactory(precision_model=PrecisionModel.fixed(10))
    thin = fixed.create_line_string([(0.0, 0.0), (1.0, 1.0)])
    print(f"  buffer on a 0.1 grid: {thin.buffer(0.25)!r}")

    print("\nCanonical ordering...")
    shapes = [rectangle, point, horizontal, factory.create_multi_point([(1, 1), (2, 2)])]
    for geom in sorted(shapes, key=geometry_sort_key):
        print(f"  {geom.geometry_type}")

    summary = geometry_summary(
        {"rectangle": rectangle, "circle": circle, "crossing": crossing},
        output_file=os.path.join(output_dir, "summary.json"),
    )
    print(f"\nSummary saved to {output_dir}")
    for i, name in enumerate(summary):
        print(f"  {i + 1}. {name}: {summary[name]['type']}")


if __name__ == "__main__":
    run_example()
