"""Terminal front end for the playground mini-programs."""
