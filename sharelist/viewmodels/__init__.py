"""ViewModel package for UI state and command surfaces.

Call context:
    ``sharelist/web_ui/main.py`` builds the list page on top of
    :class:`sharelist.viewmodels.list_vm.ListVM` and reads connection settings
    from :class:`sharelist.viewmodels.settings_vm.SettingsVM`.

Dependencies:
    Modules in this package depend on domain types and use cases only. I/O
    adapters and thread handling remain outside.
"""
