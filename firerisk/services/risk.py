"""
Fire Risk Classification Services

Lookup tables mapping a 1-5 risk level to its display color, label,
alerts and recommendations.
"""

RISK_COLORS = {
    1: 'green',
    2: 'yellow',
    3: 'orange',
    4: 'red',
    5: 'darkred'
}

RISK_LABELS = {
    1: 'Très faible',
    2: 'Faible',
    3: 'Modéré',
    4: 'Élevé',
    5: 'Très élevé'
}

UNKNOWN_COLOR = 'gray'
UNKNOWN_LABEL = 'Inconnu'

RECOMMENDATIONS = {
    1: ['Conditions normales', 'Surveillance habituelle'],
    2: ['Prudence recommandée', 'Éviter feux ouverts'],
    3: ['Vigilance accrue', 'Interdiction feux', 'Surveillance renforcée'],
    4: ['Alerte élevée', 'Interdiction totale feux', 'Préparation évacuation'],
    5: ['DANGER MAXIMUM', 'Évacuation préventive', 'Moyens de secours mobilisés']
}

DEFAULT_RECOMMENDATIONS = ['Suivre consignes officielles']

HIGH_RISK_ALERT = '🚨 Risque incendie élevé'
HEAT_ALERT = '🌡️ Température très élevée'
DRYNESS_ALERT = '💧 Humidité très faible'
WIND_ALERT = '💨 Vent fort'
NO_ALERT = '✅ Aucune alerte'

HIGH_RISK_LEVEL = 4
HEAT_THRESHOLD = 35
DRYNESS_THRESHOLD = 30
WIND_THRESHOLD = 25


def _lookup(table, level, default):
    # bool is an int subclass; True must not read as level 1
    if isinstance(level, bool):
        return default
    try:
        return table.get(level, default)
    except TypeError:
        return default


def get_risk_color(level):
    """Display color for a risk level, `gray` outside 1-5."""
    return _lookup(RISK_COLORS, level, UNKNOWN_COLOR)


def get_risk_label(level):
    """Display label for a risk level, `Inconnu` outside 1-5."""
    return _lookup(RISK_LABELS, level, UNKNOWN_LABEL)


def generate_alerts(risk_level, temperature, humidity, wind_speed):
    """Build the ordered alert list for a zone.
    
    Conditions are evaluated independently in a fixed order: high risk,
    heat, dryness, wind. The result always holds at least one entry.
    """
    alerts = []
    
    if risk_level >= HIGH_RISK_LEVEL:
        alerts.append(HIGH_RISK_ALERT)
    if temperature > HEAT_THRESHOLD:
        alerts.append(HEAT_ALERT)
    if humidity < DRYNESS_THRESHOLD:
        alerts.append(DRYNESS_ALERT)
    if wind_speed > WIND_THRESHOLD:
        alerts.append(WIND_ALERT)
    
    return alerts if alerts else [NO_ALERT]


def generate_recommendations(risk_level):
    """Recommendations for a risk level, generic advice outside 1-5."""
    return list(_lookup(RECOMMENDATIONS, risk_level, DEFAULT_RECOMMENDATIONS))
