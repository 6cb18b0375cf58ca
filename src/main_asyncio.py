"""
main_asyncio.py — Application entry point for the dial clock
------------------------------------------------------------

Responsible for:
- loading configuration and style presets
- wiring surface, clock, composer and renderer
- starting the async main loop
- graceful shutdown on Ctrl+C, SIGTERM or a failed critical task
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX
# ---------------------------------------------------------------------------

# Set UTF-8 encoding for output before logging starts (Unicode log symbols)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio

from animations.clock_animation import AnimationClock
from engine.clock_face import ClockFaceComposer
from engine.frame_renderer import FrameRenderer
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import ClockShutdownHandler, RendererShutdownHandler, TaskCancellationHandler
from managers import ConfigManager
from models.enums import LogCategory
from services.time_source import SystemWallClock
from surfaces.pillow_surface import PillowSurface
from utils.logger import get_logger, configure_logger

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------

log = get_logger().for_category(LogCategory.SYSTEM)


async def main():
    """Main async entry point (dependency wiring and event loop startup)."""

    # ===== CONFIG =====
    config_manager = ConfigManager()
    config_manager.load()
    settings = config_manager.app_settings

    configure_logger(settings.log_level, use_colors=settings.log_colors)

    clock_config = config_manager.get_clock_configuration()
    background = config_manager.get_background()

    log.info(
        "🕰️  Starting dial clock",
        style=settings.style,
        size=f"{settings.width}x{settings.height}",
        fps=settings.fps,
        output=settings.output_path or "memory",
    )

    # ===== RENDERING =====
    surface = PillowSurface(
        settings.width,
        settings.height,
        background=background,
        output_path=settings.output_path,
    )
    composer = ClockFaceComposer(clock_config)

    # ===== CLOCK =====
    clock = AnimationClock(SystemWallClock(), timings=settings.timings)
    renderer = FrameRenderer(surface, composer, clock, fps=settings.fps)

    await clock.start()
    await renderer.start()

    # ===== SHUTDOWN =====
    log.info("Initializing shutdown system...")

    coordinator = ShutdownCoordinator()
    coordinator.register(RendererShutdownHandler(renderer))
    coordinator.register(ClockShutdownHandler(clock))
    coordinator.register(TaskCancellationHandler())

    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)

    log.info("🏁 Clock running. Waiting for exit signal...")

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()

    log.info("👋 Clock shut down cleanly.", frames=renderer.frames_rendered)


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except Exception as e:
        log.error(f"Fatal error: {e}", error_type=type(e).__name__)
        sys.exit(1)
