"""Built-in user-management panel menu, filtered per role at request time."""

from panelauth.domain.shared.authorization.navigation import NavLink

_ANGLE = "fas fa-angle-right"
_REPORT = "fas fa-clipboard-list"


def _link(label: str, href: str, role: str, icon: str = _ANGLE) -> NavLink:
    return NavLink(label=label, href=href, icon=icon, role=role)


DEFAULT_NAVIGATION: dict[str, list[NavLink]] = {
    "USER DETAILS": [
        _link("Super Admin", "/user_details/super_admin", "SUPER_ADMIN", "fas fa-user-shield"),
        _link("Admin", "/user_details/admin", "ADMIN", "fas fa-user-shield"),
        _link("Sub Agent", "/user_details/sub", "SUB", "fas fa-chess-rook"),
        _link("Master Agent", "/user_details/master", "MASTER", "fas fa-crown"),
        _link("Super Agent", "/user_details/super", "SUPER_AGENT", "fas fa-user-tie"),
        _link("Agent", "/user_details/agent", "AGENT", "fas fa-user-shield"),
        _link("Client", "/user_details/client", "USER", "fas fa-user"),
        _link("Dead Users", "/user_details/dead", "USER", "fa fa-user-slash"),
    ],
    "GAMES": [
        _link("InPlay Game", "/game/inPlay", "USER", "fas fa-play"),
        _link("Complete Game", "/game/completeGame", "USER", "far fa-stop-circle"),
    ],
    "Casino": [
        _link("Live Casino Position", "#", "USER", "fas fa-chart-line"),
        _link("Casino Details", "#", "USER", "fas fa-wallet"),
        _link("Int. Casino Details", "#", "USER", "fas fa-chart-line"),
    ],
    "CASH TRANSACTION": [
        _link("Debit/Credit Entry (Super Admin)", "/ct/super_admin", "SUPER_ADMIN"),
        _link("Debit/Credit Entry (Admin)", "/ct/admin", "ADMIN"),
        _link("Debit/Credit Entry (Sub)", "/ct/sub", "SUB"),
        _link("Debit/Credit Entry (M)", "/ct/master", "MASTER"),
        _link("Debit/Credit Entry (S)", "/ct/super", "SUPER_AGENT"),
        _link("Debit/Credit Entry (A)", "/ct/agent", "AGENT"),
        _link("Debit/Credit Entry (C)", "/ct/client", "USER"),
    ],
    "LEDGER": [
        _link("My Ledger", "/ledger", "USER"),
        _link("All Super Admin Ledger", "/ledger/super_admin", "SUPER_ADMIN"),
        _link("All Admin Ledger", "/ledger/admin", "ADMIN"),
        _link("All Sub Ledger", "/ledger/sub", "SUB"),
        _link("All Master Ledger", "/ledger/master", "MASTER"),
        _link("All Super Ledger", "/ledger/super", "SUPER_AGENT"),
        _link("All Agent Ledger", "/ledger/agent", "AGENT"),
        _link("All Client Ledger", "/ledger/client", "USER"),
        _link("Client Plus/Minus", "/ledger/client/pm", "USER"),
    ],
    "COMMISSIONS": [
        _link("Commission Dashboard", "/commissions", "USER", "fas fa-coins"),
    ],
    "OLD DATA": [
        _link("Old Ledger", "#", "USER"),
        _link("Old Casino Data", "#", "USER"),
    ],
    "Login Reports": [
        _link("All Login Reports", "/reports/login-reports", "ADMIN", _REPORT),
        _link("Super Admin Login Reports", "/reports/login-reports?role=SUPER_ADMIN", "SUPER_ADMIN", _REPORT),
        _link("Admin Login Reports", "/reports/login-reports?role=ADMIN", "ADMIN", _REPORT),
        _link("Sub Login Reports", "/reports/login-reports?role=SUB", "SUB", _REPORT),
        _link("Master Login Reports", "/reports/login-reports?role=MASTER", "MASTER", _REPORT),
        _link("Super Login Reports", "/reports/login-reports?role=SUPER_AGENT", "SUPER_AGENT", _REPORT),
        _link("Agent Login Reports", "/reports/login-reports?role=AGENT", "AGENT", _REPORT),
    ],
}
