"""Rotation of height map points for display."""

import math


def rotate_points(heightmap, angle_x, angle_y, angle_z, height_z):
    """Rotate every point of ``heightmap`` in place.

    Angles are in degrees, applied about the x, y and z axes in that order;
    non-zero heights are first scaled by ``height_z``.
    """
    ax = math.radians(angle_x)
    ay = math.radians(angle_y)
    az = math.radians(angle_z)
    cos_x, sin_x = math.cos(ax), math.sin(ax)
    cos_y, sin_y = math.cos(ay), math.sin(ay)
    cos_z, sin_z = math.cos(az), math.sin(az)
    for point in heightmap:
        y = point.y_origin
        z = point.z_origin * height_z if point.z_change else point.z_origin
        y2 = y * cos_x - z * sin_x
        z2 = y * sin_x + z * cos_x
        x = point.x_origin
        x2 = x * cos_y + z2 * sin_y
        point.z = -x * sin_y + z2 * cos_y
        point.x = x2 * cos_z - y2 * sin_z
        point.y = x2 * sin_z + y2 * cos_z