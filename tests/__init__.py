"""
Test suite for Pixel Racer.

- test_road.py: procedural road generator
- test_vehicle.py: vehicle physics
- test_physics.py: wall collision
- test_input.py: key state and pause edge detection
- test_storage.py: session best-distance persistence
- test_frame_driver.py: frame scheduling, dt clamping, pause state
- test_race.py: simulation step and game-screen lifecycle
- test_ui.py: renderer and viewport scaling
- test_scenes.py: menu and race loops through the event queue
"""
