"""headlink API: heading lookup, link templating and command functions."""
