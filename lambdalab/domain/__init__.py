"""Pure domain functions shared by components."""
