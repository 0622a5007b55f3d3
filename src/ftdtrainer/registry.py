"""In-memory appliance registry with a forward-only lifecycle."""

from __future__ import annotations

from dataclasses import replace

from .models import DeviceRecord, LifecycleState

LICENSABLE_STATES = frozenset({LifecycleState.PENDING, LifecycleState.REGISTERED})


def add_device(
    devices: tuple[DeviceRecord, ...], address: str, registration_key: str
) -> tuple[DeviceRecord, ...]:
    """Append a pending record unless inputs are blank or the address exists."""
    address = address.strip()
    registration_key = registration_key.strip()
    if not address or not registration_key:
        return devices
    if find_device(devices, address) is not None:
        return devices
    return devices + (DeviceRecord(address=address, registration_key=registration_key),)


def assign_licenses(devices: tuple[DeviceRecord, ...], licenses: tuple[str, ...]) -> tuple[DeviceRecord, ...]:
    """Apply the license set to every record not yet approved."""
    # Approval freezes configuration.
    return tuple(
        replace(device, licenses=tuple(licenses)) if device.lifecycle_state in LICENSABLE_STATES else device
        for device in devices
    )


def approve(devices: tuple[DeviceRecord, ...], address: str) -> tuple[DeviceRecord, ...]:
    """Advance the record matching ``address`` to approved."""
    target = find_device(devices, address.strip())
    if target is None or target.lifecycle_state is LifecycleState.APPROVED:
        return devices
    return tuple(
        replace(device, lifecycle_state=LifecycleState.APPROVED) if device is target else device
        for device in devices
    )


def reset() -> tuple[DeviceRecord, ...]:
    """Return an empty registry."""
    return ()


def find_device(devices: tuple[DeviceRecord, ...], address: str) -> DeviceRecord | None:
    """Return the record with ``address`` if present."""
    for device in devices:
        if device.address == address:
            return device
    return None
