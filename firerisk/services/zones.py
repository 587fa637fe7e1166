"""
Monitored Zones

The fixed list of zones tracked for fire risk and their coordinates.
"""

ZONES = [
    'Var Est',
    'Var Ouest',
    'Bouches-du-Rhône Nord',
    'Bouches-du-Rhône Sud',
    'Vaucluse',
    'Alpes-de-Haute-Provence',
    'Hautes-Alpes',
    'Alpes-Maritimes',
    'Gard',
    'Hérault'
]

ZONE_COORDINATES = {
    'Var Est':                 {'lat': 43.1242, 'lng': 6.7357},
    'Var Ouest':               {'lat': 43.0969, 'lng': 6.0756},
    'Bouches-du-Rhône Nord':   {'lat': 43.5297, 'lng': 5.4474},
    'Bouches-du-Rhône Sud':    {'lat': 43.2965, 'lng': 5.3698},
    'Vaucluse':                {'lat': 43.9493, 'lng': 5.0459},
    'Alpes-de-Haute-Provence': {'lat': 44.0937, 'lng': 6.2356},
    'Hautes-Alpes':            {'lat': 44.5579, 'lng': 6.0778},
    'Alpes-Maritimes':         {'lat': 43.7102, 'lng': 7.2620},
    'Gard':                    {'lat': 43.8374, 'lng': 4.3601},
    'Hérault':                 {'lat': 43.6119, 'lng': 3.8772}
}

DEFAULT_COORDINATES = {'lat': 43.0, 'lng': 6.0}


def get_zone_coordinates(zone_name):
    """Return a copy of the zone's coordinates, or the default point."""
    return dict(ZONE_COORDINATES.get(zone_name, DEFAULT_COORDINATES))
