"""Command-line front end for print-table-lib."""

from pt_ui.presenter import HeadlessPresenter, Presenter, PresenterDiagnostics, RichPresenter

__all__ = ["HeadlessPresenter", "Presenter", "PresenterDiagnostics", "RichPresenter"]
