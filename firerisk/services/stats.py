"""
Snapshot Statistics

Aggregates a day's zone records into the summary block shown on the dashboard.
"""

from decimal import Decimal, ROUND_HALF_UP

from firerisk.schemas import Stats, RISK_LEVELS


HIGH_RISK_LEVEL = 4
ALERT_ZONE_COUNT = 3
WARNING_ZONE_COUNT = 1


def empty_stats(status='no_data'):
    """Zeroed statistics, used for an empty day or a failed snapshot."""
    return Stats(status=status)


def classify_status(high_risk_zones):
    if high_risk_zones > ALERT_ZONE_COUNT:
        return 'alert'
    if high_risk_zones > WARNING_ZONE_COUNT:
        return 'warning'
    return 'normal'


def calculate_stats(records):
    """Compute statistics for a list of ZoneRecord objects.
    
    Returns a Stats with the zone count, the number of zones at level 4 or
    more, the mean level formatted with one decimal, the per-level
    histogram and the overall status.
    """
    if not records:
        return empty_stats()
    
    levels = [record.risk_level for record in records]
    high_risk_zones = sum(1 for level in levels if level >= HIGH_RISK_LEVEL)
    # half-up, so 2.25 shows as 2.3
    average_risk = (Decimal(sum(levels)) / Decimal(len(levels))).quantize(Decimal('0.1'), ROUND_HALF_UP)
    
    distribution = {str(level): 0 for level in RISK_LEVELS}
    for level in levels:
        key = str(level)
        if key in distribution:
            distribution[key] += 1
    
    return Stats(
        total_zones=len(records),
        high_risk_zones=high_risk_zones,
        average_risk=str(average_risk),
        risk_distribution=distribution,
        status=classify_status(high_risk_zones)
    )
