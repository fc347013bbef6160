from appdeck.application.bootstrap import RuntimeServices, initialize_runtime_services
from appdeck.application.shared_state import SharedState
from appdeck.application.ui_hooks import notification_ui_hooks
from appdeck.domain.models import AppConfig
from appdeck.ui.headless import HeadlessHost, HeadlessUtilityLibrary, RecordingLauncher


def test_initialize_runtime_services_wires_collaborators(runtime, host_config):
    services = runtime.services

    assert isinstance(services, RuntimeServices)
    assert services.lifecycle.registry is services.registry
    assert services.lifecycle.host is runtime.host
    assert services.lifecycle.launcher is runtime.launcher
    assert services.lifecycle.contexts.shared is services.shared_state
    assert services.lifecycle.contexts.library is runtime.library
    assert services.scheduler.lifecycle is services.lifecycle
    assert services.scheduler.max_consecutive_failures == host_config.max_update_failures
    assert services.scheduler.max_frame_delta == host_config.max_frame_delta
    assert services.lifecycle.boundary is services.boundary
    assert services.lifecycle.clock is runtime.clock
    assert services.lifecycle.clock() == 10.0


def test_registrations_reach_launcher(runtime):
    runtime.registry.register(
        AppConfig(name="Todo", icon="T", icon_color="#112233", on_open=lambda _ctx: None)
    )

    registration = runtime.launcher.icons["todo"]
    assert registration.icon == "T"
    assert registration.icon_color == "#112233"


def test_injected_shared_state_and_config_values(make_config, logger):
    shared = SharedState({"theme": "dark"})
    library = HeadlessUtilityLibrary(logger=logger)
    services = initialize_runtime_services(
        config=make_config(max_update_failures=0, max_frame_delta=0.1),
        logger=logger,
        host=HeadlessHost(),
        library=library,
        ui_hooks=notification_ui_hooks(library.notify),
        launcher=RecordingLauncher(logger),
    )
    services_shared = initialize_runtime_services(
        config=make_config(),
        logger=logger,
        host=HeadlessHost(),
        library=library,
        ui_hooks=notification_ui_hooks(library.notify),
        shared_state=shared,
    )

    assert services.scheduler.max_consecutive_failures == 0
    assert services.scheduler.max_frame_delta == 0.1
    assert services_shared.shared_state is shared
    assert services_shared.launcher is None
    assert any("max_update_failures=0" in message for message in logger.debugs)
