"""In-memory beam schedule."""
import pytest

from conftest import make_inputs
from rcbeam.config import DesignSettings
from rcbeam.core.beam_design import BeamDesignEngine
from rcbeam.schedule import DesignSchedule


@pytest.fixture
def schedule_with_reference(reference_run, reference_inputs):
    loads, _, result = reference_run
    schedule = DesignSchedule()
    entry = schedule.save(reference_inputs, result, loads=loads)
    return schedule, entry


class TestSave:

    def test_defaults(self, schedule_with_reference):
        schedule, entry = schedule_with_reference
        assert len(entry.id) == 9
        assert entry.name == "Beam B1"
        assert entry.total_design_udl == pytest.approx(35.26875)
        assert entry.id in schedule
        assert len(schedule) == 1

    def test_names_follow_count(self, schedule_with_reference, reference_run, reference_inputs):
        schedule, _ = schedule_with_reference
        second = schedule.save(reference_inputs, reference_run[2])
        assert second.name == "Beam B2"
        assert second.total_design_udl is None
        assert [e.id for e in schedule] == [e.id for e in schedule.list()]

    def test_stored_copies_are_independent(self, schedule_with_reference, reference_inputs):
        _, entry = schedule_with_reference
        assert entry.inputs == reference_inputs
        assert entry.inputs is not reference_inputs


class TestEdit:

    def test_rename(self, schedule_with_reference):
        schedule, entry = schedule_with_reference
        renamed = schedule.rename(entry.id, "Lintel L1")
        assert renamed.name == "Lintel L1"
        assert renamed.created_at == entry.created_at
        assert schedule.get(entry.id).name == "Lintel L1"

    def test_remove(self, schedule_with_reference):
        schedule, entry = schedule_with_reference
        assert schedule.remove(entry.id) == entry
        assert len(schedule) == 0
        with pytest.raises(KeyError):
            schedule.get(entry.id)

    def test_unknown_id(self):
        with pytest.raises(KeyError):
            DesignSchedule().remove("missing")


class TestRecompute:

    def test_recompute_is_identical(self, schedule_with_reference):
        schedule, entry = schedule_with_reference
        fresh, same = schedule.recompute(entry.id)
        assert same
        assert fresh == entry.design

    def test_recompute_with_other_settings_differs(self):
        schedule = DesignSchedule()
        inputs = make_inputs()
        _, _, result = BeamDesignEngine().design(inputs)
        entry = schedule.save(inputs, result)
        _, same = schedule.recompute(entry.id, DesignSettings(load_factor=2.5))
        assert not same

    def test_recompute_reuses_saved_settings(self):
        schedule = DesignSchedule()
        inputs = make_inputs()
        settings = DesignSettings(load_factor=1.2)
        loads, _, result = BeamDesignEngine(settings).design(inputs)
        entry = schedule.save(inputs, result, loads=loads, settings=settings)
        assert entry.settings == settings

        fresh, same = schedule.recompute(entry.id)
        assert same
        assert fresh == entry.design
