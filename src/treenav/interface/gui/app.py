from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes the CustomTkinter environment, restores the persisted tree and
cursor, assembles the view hierarchy, binds arrow keys and buttons to the
AppController, and saves the state when the window closes.
"""

import logging
import queue

import customtkinter as ctk

from treenav.domain import config as cfg
from treenav.domain import constants as const
from treenav.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from treenav.interface.gui.components.main_window import create_main_window
from treenav.interface.gui.components.sidebar import SidebarFrame
from treenav.interface.gui.components.status_bar import StatusBar
from treenav.interface.gui.components.tree_view import TreeViewFrame
from treenav.interface.gui.controllers.main_controller import AppController

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """
    Initialize and launch the Graphical User Interface.

    Startup sequence: State Recovery, Logging Setup, UI Construction,
    Controller Binding, Loop Entry.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: PERSISTENT STATE RECOVERY
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    settings = app_state["app_settings"]

    # -----------------------------------------------------------------------------
    # PHASE 2: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    ui_log_queue: queue.Queue = queue.Queue()
    configure_logging(LoggingConfig(
        level=settings["log_level"],
        console=True,
        log_file=get_default_log_path(),
        ui_queue=ui_log_queue,
    ))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    content = cfg.content_from_state(app_state)

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW COMPONENT HIERARCHY CONSTRUCTION
    # -----------------------------------------------------------------------------
    app = create_main_window(settings)

    sidebar_frame = SidebarFrame(app, settings)
    sidebar_frame.grid(row=0, column=0, rowspan=2, sticky="nsew")

    tree_frame = TreeViewFrame(app)
    tree_frame.grid(row=0, column=1, sticky="nsew", padx=20, pady=(20, 10))

    status_bar = StatusBar(app)
    status_bar.grid(row=1, column=1, sticky="ew")

    # -----------------------------------------------------------------------------
    # PHASE 4: CONTROLLER INTEGRATION AND EVENT BINDING
    # -----------------------------------------------------------------------------
    controller = AppController(app, content, app_state)
    controller.register_views(tree_frame, status_bar, sidebar_frame)

    for sequence, direction in const.KEY_BINDINGS.items():
        app.bind(sequence, lambda event, d=direction: controller.on_key(event, d))

    sidebar_frame.btn_regenerate.configure(
        command=lambda: controller.regenerate(*sidebar_frame.get_generator_values())
    )
    sidebar_frame.btn_root.configure(command=controller.reset_cursor)

    def on_appearance_selected(mode: str) -> None:
        ctk.set_appearance_mode(mode)
        app_state["app_settings"]["appearance_mode"] = mode

    sidebar_frame.combo_appearance.configure(command=on_appearance_selected)

    controller.fit_to_view()
    controller.refresh()

    # -----------------------------------------------------------------------------
    # PHASE 5: BACKGROUND POLLING
    # -----------------------------------------------------------------------------
    def poll_log_queue() -> None:
        """Show the latest log message in the status bar."""
        latest = None
        while True:
            try:
                latest = ui_log_queue.get_nowait()
            except queue.Empty:
                break
        if latest is not None:
            status_bar.show_message(latest.getMessage())
        app.after(200, poll_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 6: LIFECYCLE FINALIZATION
    # -----------------------------------------------------------------------------
    def on_closing() -> None:
        """Persist session state and terminate the process."""
        cfg.save_app_state(controller.sync_state())
        logger.info("GUI Lifecycle: State saved. Closing.")
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.after(200, poll_log_queue)

    app.mainloop()


if __name__ == "__main__":
    main()
