"""Unit tests for the register/cancel seat bookkeeping."""

from uuid import uuid4

import pytest

from conftest import BackendError, make_event
from core.domain.models import Registration, RegistrationStatus


class TestRegister:
    async def test_inserts_confirmed_row_then_increments(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event(capacity=10, registered_count=9))

        result = await registration_service.register(event.id, user.id)

        assert result.count_updated is True
        assert result.registration.status == RegistrationStatus.CONFIRMED
        assert registration_repo.rows[result.registration.id].user_id == user.id
        assert event_repo.rpc_calls == [("increment_registered_count", event.id)]
        assert event_repo.rows[event.id].registered_count == 10

    async def test_insert_failure_raises_and_skips_counter(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event())
        registration_repo.fail_create = True

        with pytest.raises(BackendError):
            await registration_service.register(event.id, user.id)

        assert event_repo.rpc_calls == []
        assert event_repo.rows[event.id].registered_count == 0

    async def test_counter_failure_keeps_confirmed_registration(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event(registered_count=3))
        event_repo.fail_rpc = True

        result = await registration_service.register(event.id, user.id)

        assert result.count_updated is False
        assert registration_repo.rows[result.registration.id].status == RegistrationStatus.CONFIRMED
        assert event_repo.rows[event.id].registered_count == 3

    async def test_duplicate_registration_is_not_guarded(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event())

        await registration_service.register(event.id, user.id)
        await registration_service.register(event.id, user.id)

        assert len(registration_repo.rows) == 2
        assert event_repo.rows[event.id].registered_count == 2


class TestRegisteredEvents:
    async def test_registered_ids_only_include_confirmed(
        self, registration_service, registration_repo, event_repo, user
    ):
        kept = event_repo.add(make_event("Kept"))
        dropped = event_repo.add(make_event("Dropped"))
        await registration_service.register(kept.id, user.id)
        result = await registration_service.register(dropped.id, user.id)
        await registration_service.cancel(result.registration.id, dropped.id)

        assert await registration_service.get_registered_event_ids(user.id) == {kept.id}

    async def test_join_pairs_events_with_registration_ids(
        self, registration_service, event_repo, user
    ):
        first = event_repo.add(make_event("First"))
        second = event_repo.add(make_event("Second"))
        event_repo.add(make_event("Not mine"))
        reg_first = await registration_service.register(first.id, user.id)
        reg_second = await registration_service.register(second.id, user.id)

        joined = await registration_service.get_user_registrations(user.id)

        by_title = {r.event.title: r for r in joined}
        assert set(by_title) == {"First", "Second"}
        assert by_title["First"].registration_id == reg_first.registration.id
        assert by_title["Second"].registration_id == reg_second.registration.id
        assert all(r.status == RegistrationStatus.CONFIRMED for r in joined)

    async def test_duplicate_registrations_join_to_the_first(
        self, registration_service, event_repo, user
    ):
        event = event_repo.add(make_event("Jazz Night"))
        first = await registration_service.register(event.id, user.id)
        await registration_service.register(event.id, user.id)

        joined = await registration_service.get_user_registrations(user.id)

        assert len(joined) == 1
        assert joined[0].registration_id == first.registration.id

    async def test_no_registrations_skips_event_query(self, registration_service, event_repo, user):
        calls = []
        original = event_repo.get_by_ids

        async def tracking(ids):
            calls.append(list(ids))
            return await original(ids)

        event_repo.get_by_ids = tracking

        assert await registration_service.get_user_registrations(user.id) == []
        assert calls == []

    async def test_registration_for_missing_event_is_dropped(
        self, registration_service, registration_repo, user
    ):
        orphan = Registration(id=uuid4(), event_id=uuid4(), user_id=user.id)
        registration_repo.rows[orphan.id] = orphan

        assert await registration_service.get_user_registrations(user.id) == []


class TestCancel:
    async def test_flips_status_then_decrements(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event(capacity=10, registered_count=9))
        result = await registration_service.register(event.id, user.id)

        assert await registration_service.cancel(result.registration.id, event.id) is True

        assert registration_repo.rows[result.registration.id].status == RegistrationStatus.CANCELLED
        assert len(registration_repo.rows) == 1  # soft delete
        assert event_repo.rows[event.id].registered_count == 9
        assert event_repo.rpc_calls[-1] == ("decrement_registered_count", event.id)

    async def test_update_failure_raises_and_skips_counter(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event())
        result = await registration_service.register(event.id, user.id)
        registration_repo.fail_update = True

        with pytest.raises(BackendError):
            await registration_service.cancel(result.registration.id, event.id)

        assert event_repo.rpc_calls == [("increment_registered_count", event.id)]

    async def test_counter_failure_leaves_registration_cancelled(
        self, registration_service, registration_repo, event_repo, user
    ):
        event = event_repo.add(make_event())
        result = await registration_service.register(event.id, user.id)
        event_repo.fail_rpc = True

        assert await registration_service.cancel(result.registration.id, event.id) is False

        assert registration_repo.rows[result.registration.id].status == RegistrationStatus.CANCELLED
        assert event_repo.rows[event.id].registered_count == 1
