"""Surveyed venue locations in British National Grid metres.

``POINT_LOCATIONS`` are placed as individual markers. ``CORNER_LOCATIONS``
are the footprint corners of each area; the trailing number in a label is the
corner index and four corners with the same section and name make one
polygon.
"""

from __future__ import annotations

from venue_map.common.models import LocationRecord

POINT_LOCATIONS: tuple[LocationRecord, ...] = (
    LocationRecord("Mens", "Main Marquee entrance 1", 476143.15, 137423.20),
    LocationRecord("Mens", "Main Marquee entrance 2", 476173.89, 137407.56),
    LocationRecord("Mens", "Main Marquee entrance 3", 476205.50, 137391.37),
    LocationRecord("Mens", "Main Marquee entrance 4", 476231.80, 137378.03),
    LocationRecord("Mens", "Dining entrance 1", 476040.61, 137446.02),
    LocationRecord("Mens", "Dining entrance 2", 476044.81, 137435.68),
    LocationRecord("Mens", "Dining entrance 3", 476056.41, 137407.07),
    LocationRecord("Mens", "Dining entrance 4", 476061.90, 137393.54),
    LocationRecord("Mens", "Dining entrance 5", 476067.94, 137378.67),
    LocationRecord("Mens", "Dining entrance 6", 476073.54, 137364.86),
    LocationRecord("Mens", "Dining entrance 7", 476081.39, 137345.52),
    LocationRecord("Mens", "Dining entrance 8", 476085.79, 137334.81),
    LocationRecord("Mens", "Dining entrance 9", 476091.17, 137321.55),
    LocationRecord("Mens", "Dining entrance 10", 476096.50, 137307.84),
    LocationRecord("Mens", "Accom entrance", 475994.03, 137370.27),
    LocationRecord("Mens", "Bazaar", 475964.57, 137455.61),
    LocationRecord("Lajna", "Main Marquee entrance 1", 476217.60, 137542.65),
    LocationRecord("Lajna", "Main Marquee entrance 2", 476244.04, 137529.10),
    LocationRecord("Lajna", "Main Marquee entrance 3", 476271.44, 137515.14),
    LocationRecord("Lajna", "Main Marquee entrance 4", 476289.25, 137506.04),
    LocationRecord("Lajna", "Dining entrance 1", 476357.81, 137659.38),
    LocationRecord("Lajna", "Dining entrance 2", 476363.47, 137650.02),
    LocationRecord("Lajna", "Dining entrance 3", 476379.56, 137622.43),
    LocationRecord("Lajna", "Dining entrance 4", 476397.06, 137591.69),
    LocationRecord("Lajna", "Dining entrance 5", 476389.50, 137558.06),
    LocationRecord("Lajna", "Dining entrance 6", 476394.97, 137541.14),
    LocationRecord("Lajna", "Accom entrance", 476291.71, 137701.39),
    LocationRecord("Lajna", "Bazaar entrance", 476396.56, 137518.88),
)

CORNER_LOCATIONS: tuple[LocationRecord, ...] = (
    LocationRecord("Mens", "Main Marquee 1", 476141.49, 137480.49),
    LocationRecord("Mens", "Main Marquee 2", 476118.76, 137435.32),
    LocationRecord("Mens", "Main Marquee 3", 476266.19, 137416.87),
    LocationRecord("Mens", "Main Marquee 4", 476243.42, 137382.36),
    LocationRecord("Mens", "Dining 1", 476015.26, 137442.31),
    LocationRecord("Mens", "Dining 2", 476038.32, 137451.66),
    LocationRecord("Mens", "Dining 3", 476031.22, 137331.45),
    LocationRecord("Mens", "Dining 4", 476083.44, 137340.47),
    LocationRecord("Mens", "Accom 1", 475972.78, 137398.11),
    LocationRecord("Mens", "Accom 2", 475917.67, 137374.40),
    LocationRecord("Mens", "Accom 3", 475949.56, 137293.54),
    LocationRecord("Mens", "Accom 4", 476008.30, 137315.55),
    LocationRecord("Lajna", "Main Marquee 1", 476173.00, 137509.28),
    LocationRecord("Lajna", "Main Marquee 2", 476195.74, 137553.81),
    LocationRecord("Lajna", "Main Marquee 3", 476279.95, 137454.76),
    LocationRecord("Lajna", "Main Marquee 4", 476302.61, 137499.22),
    LocationRecord("Lajna", "Dining 1", 476351.42, 137670.25),
    LocationRecord("Lajna", "Dining 2", 476372.99, 137682.89),
    LocationRecord("Lajna", "Dining 3", 476410.04, 137570.15),
    LocationRecord("Lajna", "Dining 4", 476431.61, 137582.79),
    LocationRecord("Lajna", "Accom 1", 476268.06, 137686.19),
    LocationRecord("Lajna", "Accom 2", 476359.42, 137738.47),
    LocationRecord("Lajna", "Accom 3", 476382.16, 137699.63),
    LocationRecord("Lajna", "Accom 4", 476301.70, 137630.58),
    LocationRecord("Lajna", "Bazaar 1", 476388.81, 137511.84),
    LocationRecord("Lajna", "Bazaar 2", 476452.81, 137549.51),
    LocationRecord("Lajna", "Bazaar 3", 476483.99, 137495.93),
    LocationRecord("Lajna", "Bazaar 4", 476419.01, 137460.00),
)
