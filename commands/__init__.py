"""CLI command modules.

This package contains:
- base: Shared plumbing that runs bulb commands through the dispatcher
- control: Direct control commands (power, color)
- effects: Long-running effects (blink, rainbow)
- inventory: Gateway and named bulb management (devices, register, forget, set-gateway)
- setup: Setup and help commands
"""
