from itertools import permutations

from ftdtrainer import registry
from ftdtrainer.models import DeviceRecord, LifecycleState

LICENSES = ("Threat", "URL")


def test_add_device_appends_pending_record() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    assert devices == (DeviceRecord(address="10.0.0.1", registration_key="K1"),)
    assert devices[0].lifecycle_state is LifecycleState.PENDING
    assert devices[0].licenses == ()


def test_add_device_first_write_wins() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    again = registry.add_device(devices, "10.0.0.1", "K2")
    assert again is devices
    assert [device.registration_key for device in again] == ["K1"]


def test_add_device_rejects_blank_inputs() -> None:
    assert registry.add_device((), "", "K1") == ()
    assert registry.add_device((), "10.0.0.1", "  ") == ()


def test_add_device_trims_inputs() -> None:
    devices = registry.add_device((), " 10.0.0.1 ", " K1 ")
    assert devices[0].address == "10.0.0.1"
    assert registry.add_device(devices, "10.0.0.1  ", "K2") is devices


def test_add_device_unique_per_address_in_any_order() -> None:
    calls = [("10.0.0.1", "A"), ("10.0.0.2", "B"), ("10.0.0.1", "C"), ("10.0.0.2", "D")]
    for order in permutations(calls):
        devices: tuple[DeviceRecord, ...] = ()
        for address, key in order:
            devices = registry.add_device(devices, address, key)
        addresses = [device.address for device in devices]
        assert sorted(addresses) == ["10.0.0.1", "10.0.0.2"]


def test_assign_licenses_skips_approved_records() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    devices = registry.add_device(devices, "10.0.0.2", "K2")
    devices = registry.approve(devices, "10.0.0.1")
    devices = registry.assign_licenses(devices, LICENSES)
    first, second = devices
    assert first.licenses == ()
    assert second.licenses == LICENSES
    assert second.lifecycle_state is LifecycleState.PENDING


def test_assign_licenses_applies_to_registered() -> None:
    devices = (DeviceRecord("10.0.0.3", "K3", lifecycle_state=LifecycleState.REGISTERED),)
    (device,) = registry.assign_licenses(devices, LICENSES)
    assert device.licenses == LICENSES
    assert device.lifecycle_state is LifecycleState.REGISTERED


def test_approve_targets_exactly_one_record() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    devices = registry.add_device(devices, "10.0.0.2", "K2")
    approved = registry.approve(devices, "10.0.0.2")
    assert [device.lifecycle_state for device in approved] == [LifecycleState.PENDING, LifecycleState.APPROVED]


def test_approve_from_registered() -> None:
    devices = (DeviceRecord("10.0.0.3", "K3", lifecycle_state=LifecycleState.REGISTERED),)
    assert registry.approve(devices, "10.0.0.3")[0].lifecycle_state is LifecycleState.APPROVED


def test_approve_noop_cases() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    assert registry.approve(devices, "10.9.9.9") is devices
    approved = registry.approve(devices, "10.0.0.1")
    assert registry.approve(approved, "10.0.0.1") is approved


def test_reset_and_find() -> None:
    devices = registry.add_device((), "10.0.0.1", "K1")
    assert registry.find_device(devices, "10.0.0.1") == devices[0]
    assert registry.find_device(devices, "10.0.0.2") is None
    assert registry.reset() == ()
