"""Report, history, progress, spinner and histogram helpers for test runs."""