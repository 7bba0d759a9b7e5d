"""Cross-preference update rules.

Each rule runs only when its trigger preference is changed by the user. The
changes it makes to other preferences go through ``set_value`` and
``set_enabled``, which never run rules, so a cascade stops at its direct
targets. A target may itself be a trigger (the master toggle updates the
extreme alert switch) without running that trigger's rule. Keep RULE_TARGETS
in sync when adding a rule: the trigger to target graph must stay acyclic.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from config import PreferenceStore
from .preferences import SwitchPreference
from .settings_schema import (
    SUB_ALERT_KEYS,
    KEY_MASTER_TOGGLE,
    KEY_EXTREME_ALERTS,
    KEY_SEVERE_ALERTS,
    KEY_OVERRIDE_DND,
    KEY_ALERT_VIBRATE,
    KEY_OVERRIDE_DND_SETTINGS_CHANGED,
)


logger = logging.getLogger(__name__)

RULE_TARGETS: Dict[str, Tuple[str, ...]] = {
    KEY_MASTER_TOGGLE: SUB_ALERT_KEYS,
    KEY_EXTREME_ALERTS: (KEY_SEVERE_ALERTS,),
    KEY_OVERRIDE_DND: (KEY_ALERT_VIBRATE,),
}


def master_update_sub_alerts(sub_alerts: Iterable[SwitchPreference], alerts_enabled: bool) -> None:
    """Enable and check (or disable and uncheck) every sub-alert together."""
    logger.debug("Master toggle -> %s, updating sub-alerts", alerts_enabled)
    for node in sub_alerts:
        node.set_enabled(alerts_enabled)
        node.set_value(alerts_enabled)


def extreme_update_severe(
    severe: SwitchPreference,
    extreme_enabled: bool,
    severe_depends_on_extreme: bool,
) -> None:
    """Severe alerts can only be on while extreme alerts are on."""
    if not severe_depends_on_extreme:
        return
    logger.debug("Extreme alerts -> %s, updating severe alerts", extreme_enabled)
    severe.set_enabled(extreme_enabled)
    if not extreme_enabled:
        severe.set_value(False)


def override_dnd_update_vibrate(
    store: PreferenceStore,
    vibrate: SwitchPreference,
    override_dnd: bool,
) -> None:
    """Vibration is forced on, and locked, while alerts override DND."""
    store.set_boolean(KEY_OVERRIDE_DND_SETTINGS_CHANGED, True)
    logger.debug("Override DND -> %s, updating vibration", override_dnd)
    if override_dnd:
        vibrate.set_value(True)
    vibrate.set_enabled(not override_dnd)
