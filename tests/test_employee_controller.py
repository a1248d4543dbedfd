"""
Tests for the fetch -> decode -> present flow
"""
import asyncio

import pytest

from adapters.employee_fetcher import EmployeeFetcher
from conftest import EMPTY_BODY, ONE_EMPLOYEE_BODY, StubSource, refusing_transport
from core.dispatch import InlineDispatcher, LoopDispatcher
from core.domain.models import EmployeeRecord
from core.domain.results import LoadResult
from core.services.employee_controller import EmployeeController
from core.services.employee_presenter import EmployeePresenter, PresenterState


class TestLoad:
    """Test load() result classification"""

    @pytest.mark.asyncio
    async def test_success_result(self):
        controller = EmployeeController(EmployeePresenter(), StubSource(ONE_EMPLOYEE_BODY))

        result = await controller.load()

        assert result.ok
        assert result.response.employees == [EmployeeRecord(name="Asha", profile="Engineer")]

    @pytest.mark.asyncio
    async def test_transport_failure_is_distinguished(self, refused_source):
        controller = EmployeeController(EmployeePresenter(), refused_source)

        result = await controller.load()

        assert not result.ok
        assert result.is_transport_error
        assert not result.is_decode_error

    @pytest.mark.asyncio
    async def test_decode_failure_is_distinguished(self):
        controller = EmployeeController(EmployeePresenter(), StubSource(b"not valid json"))

        result = await controller.load()

        assert result.is_decode_error
        assert not result.is_transport_error

    @pytest.mark.asyncio
    async def test_load_does_not_touch_presenter(self):
        presenter = EmployeePresenter()
        controller = EmployeeController(presenter, StubSource(ONE_EMPLOYEE_BODY))

        await controller.load()

        assert presenter.state is PresenterState.EMPTY


class TestStart:
    """Test the one-shot start() flow"""

    @pytest.mark.asyncio
    async def test_single_employee_scenario(self):
        presenter = EmployeePresenter()
        controller = EmployeeController(presenter, StubSource(ONE_EMPLOYEE_BODY))

        await controller.start()

        assert presenter.count() == 1
        assert presenter.row_at(0) == ("Asha", "Engineer")

    @pytest.mark.asyncio
    async def test_rows_match_every_employee(self, three_employees_body):
        presenter = EmployeePresenter()
        controller = EmployeeController(presenter, StubSource(three_employees_body))

        result = await controller.start()

        assert presenter.count() == len(result.response.employees)
        for i, employee in enumerate(result.response.employees):
            assert presenter.row_at(i) == (employee.name, employee.profile)

    @pytest.mark.asyncio
    async def test_empty_list_scenario(self):
        presenter = EmployeePresenter()
        controller = EmployeeController(presenter, StubSource(EMPTY_BODY))

        await controller.start()

        assert presenter.count() == 0

    @pytest.mark.asyncio
    async def test_connection_refused_leaves_presenter_empty(self, settings):
        presenter = EmployeePresenter()
        fetcher = EmployeeFetcher(settings, transport=refusing_transport())
        controller = EmployeeController(presenter, fetcher)

        result = await controller.start()

        assert result.is_transport_error
        assert presenter.state is PresenterState.EMPTY
        assert presenter.count() == 0

    @pytest.mark.asyncio
    async def test_invalid_json_leaves_previous_rows_untouched(self):
        presenter = EmployeePresenter()
        presenter.replace_all([EmployeeRecord(name="Ravi", profile="Designer")])
        controller = EmployeeController(presenter, StubSource(b"not valid json"))

        await controller.start()

        assert presenter.count() == 1
        assert presenter.row_at(0) == ("Ravi", "Designer")

    @pytest.mark.asyncio
    async def test_start_runs_only_once(self):
        source = StubSource(ONE_EMPLOYEE_BODY)
        controller = EmployeeController(EmployeePresenter(), source)

        await controller.start()
        with pytest.raises(RuntimeError):
            await controller.start()

        assert source.calls == 1
        assert controller.started is True

    @pytest.mark.asyncio
    async def test_late_result_is_dropped_for_closed_presenter(self):
        presenter = EmployeePresenter()
        controller = EmployeeController(presenter, StubSource(ONE_EMPLOYEE_BODY))
        presenter.close()

        result = await controller.start()

        assert result.ok
        assert presenter.count() == 0

    @pytest.mark.asyncio
    async def test_loop_dispatcher_applies_on_owner_thread(self):
        loop = asyncio.get_running_loop()
        presenter = EmployeePresenter()
        applied = asyncio.Event()
        presenter.add_listener(lambda rows: applied.set())
        controller = EmployeeController(
            presenter,
            StubSource(ONE_EMPLOYEE_BODY),
            dispatcher=LoopDispatcher(loop),
        )

        result = await asyncio.to_thread(asyncio.run, controller.start())
        await asyncio.wait_for(applied.wait(), timeout=2)

        assert result.ok
        assert presenter.row_at(0) == ("Asha", "Engineer")


class TestSupportTypes:
    """Test dispatch and result helpers"""

    def test_inline_dispatcher_runs_immediately(self):
        calls = []

        InlineDispatcher().submit(lambda: calls.append(1))

        assert calls == [1]

    def test_load_result_requires_exactly_one_side(self):
        with pytest.raises(ValueError):
            LoadResult()
