"""
Unit tests for the four-step application wizard.
"""

from dog_license.app.wizard import STEPS, WizardState


def owner_values(draft):
    return {k: draft[k] for k in STEPS[0].fields}


class TestWizardState:

    def setup_method(self):
        self.state = WizardState()

    def test_initial_state(self):
        assert self.state.current_step == 0
        assert self.state.is_first
        assert not self.state.is_last
        assert self.state.progress() == ["active", "todo", "todo", "todo"]
        assert self.state.step.title == "Owner Information"

    def test_empty_step_blocks_next(self):
        assert self.state.next_step() is False
        assert self.state.current_step == 0
        assert set(self.state.errors) == set(STEPS[0].fields)
        assert self.state.errors["owner_first_name"] == "First name must be at least 2 characters"

    def test_only_active_step_is_checked(self, draft):
        self.state.update(owner_values(draft))
        assert self.state.next_step() is True
        assert self.state.current_step == 1
        assert self.state.errors == {}
        assert self.state.progress() == ["done", "active", "todo", "todo"]

    def test_invalid_field_blocks_next(self, draft):
        self.state.update(owner_values(draft))
        self.state.update({"owner_email": "nope"})
        assert self.state.next_step() is False
        assert self.state.errors == {"owner_email": "Invalid email format"}

    def test_fixing_a_field_clears_its_error(self, draft):
        self.state.update({**owner_values(draft), "owner_zip_code": "1"})
        self.state.next_step()
        assert "owner_zip_code" in self.state.errors
        self.state.update({"owner_zip_code": "17101"})
        assert self.state.next_step() is True
        assert "owner_zip_code" not in self.state.errors

    def test_prev_never_below_zero(self):
        self.state.prev_step()
        assert self.state.current_step == 0

    def test_prev_keeps_draft(self, draft):
        self.state.update(owner_values(draft))
        self.state.next_step()
        self.state.prev_step()
        assert self.state.current_step == 0
        assert self.state.draft["owner_first_name"] == "Jane"

    def test_walk_to_last_step(self, draft):
        self.state.update(draft)
        for _ in range(len(STEPS) - 1):
            assert self.state.next_step()
        assert self.state.is_last
        assert self.state.step.title == "License & Payment"
        # next on the last step validates but stays put
        assert self.state.next_step() is True
        assert self.state.current_step == len(STEPS) - 1
        assert self.state.validate_all() == {}

    def test_license_fee_follows_draft(self):
        assert self.state.license_fee == 0
        self.state.update({"license_period": "3-year"})
        assert self.state.license_fee == 60

    def test_reset(self, draft):
        self.state.update(draft)
        self.state.next_step()
        self.state.reset()
        assert self.state.current_step == 0
        assert self.state.draft == {}
        assert self.state.errors == {}
