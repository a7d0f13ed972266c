"""
binstall Test Suite

- unit/: Tests for individual components in isolation
- integration/: Tests for full install runs and the CLI
- fixtures/: Fake build tool used by the tests
"""
