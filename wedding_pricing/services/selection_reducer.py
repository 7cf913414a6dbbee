"""Selection reducer - the only place selection rules are enforced.

Add-ons need a base service:
- BlurayPackage requires VideoRecording
- TwoDayEvent requires Photography or VideoRecording

Selecting an add-on without its base is ignored. Removing a base service
removes the add-ons that depended on it.
"""

import logging
from typing import Iterable

from wedding_pricing.domain import (
    ActionType,
    InvalidActionError,
    Selection,
    SelectionAction,
    ServiceType,
    UnknownServiceError,
)

logger = logging.getLogger(__name__)

BASE_SERVICES = frozenset({ServiceType.PHOTOGRAPHY, ServiceType.VIDEO_RECORDING})


def update_selected_services(
    previously_selected: Iterable[ServiceType],
    action: SelectionAction,
) -> Selection:
    """Return the selection that results from applying ``action``.

    The input is never modified; a new frozenset is always returned.

    Raises:
        InvalidActionError: If the action type is neither Select nor Deselect.
        UnknownServiceError: If a service name is not offered.
    """
    if action.type not in (ActionType.SELECT, ActionType.DESELECT):
        raise InvalidActionError(action.type)

    current: Selection = frozenset(_as_service(s) for s in previously_selected)
    service = _as_service(action.service)

    if action.type == ActionType.SELECT:
        if not _requirements_met(current, service):
            logger.debug("Ignoring selection of %s: required service missing", service.value)
            return current
        return current | {service}

    updated = current - {service}
    if service not in BASE_SERVICES:
        return updated
    dropped = {addon for addon in updated if not _requirements_met(updated, addon)}
    if dropped:
        logger.debug(
            "Deselecting %s also removed %s",
            service.value,
            sorted(addon.value for addon in dropped),
        )
    return updated - dropped


def _as_service(service) -> ServiceType:
    try:
        return ServiceType(service)
    except ValueError:
        raise UnknownServiceError(service) from None


def _requirements_met(selection: Selection, service: ServiceType) -> bool:
    if service is ServiceType.BLURAY_PACKAGE:
        return ServiceType.VIDEO_RECORDING in selection
    if service is ServiceType.TWO_DAY_EVENT:
        return not BASE_SERVICES.isdisjoint(selection)
    return True


transition = update_selected_services
