"""Default icons keyed by whole file name."""

from __future__ import annotations

# Keys are lower-case file names; a few capitalised variants are kept as well.
_ICONS_BY_NAME: tuple[tuple[str, str], ...] = (
    ("a.out", "\uf489"),
    ("api", "\U000f048d"),
    (".atom", "\ue764"),
    ("authorized_keys", "\ue60a"),
    ("backups", "\U000f006f"),
    (".bash_logout", "\ue615"),
    (".bash_profile", "\ue615"),
    (".bashrc", "\uf489"),
    ("bin", "\ue5fc"),
    (".bpython_history", "\ue606"),
    ("bspwmrc", "\ue615"),
    ("cargo.lock", "\ue7a8"),
    ("cargo.toml", "\ue7a8"),
    (".cargo", "\ue7a8"),
    ("changelog", "\ue609"),
    (".clang-format", "\ue615"),
    ("composer.json", "\ue608"),
    ("conf.d", "\ue5fc"),
    ("config.ac", "\ue615"),
    ("config.el", "\ue779"),
    ("config.mk", "\ue615"),
    (".config", "\ue5fc"),
    ("config", "\ue5fc"),
    ("contributing", "\ue60a"),
    ("copyright", "\ue60a"),
    ("cron.daily", "\ue5fc"),
    ("cron.d", "\ue5fc"),
    ("cron.hourly", "\ue5fc"),
    ("cron.monthly", "\ue5fc"),
    ("crontab", "\ue615"),
    ("cron.weekly", "\ue5fc"),
    ("crypttab", "\ue615"),
    ("css", "\ue749"),
    ("custom.el", "\ue779"),
    (".dbus", "\uf013"),
    ("desktop", "\uf108"),
    ("docker-compose.yml", "\uf308"),
    ("dockerfile", "\uf308"),
    ("doc", "\uf02d"),
    ("documents", "\uf02d"),
    (".doom.d", "\ue779"),
    ("downloads", "\uf498"),
    (".ds_store", "\uf179"),
    (".editorconfig", "\ue615"),
    (".emacs.d", "\ue779"),
    (".env", "\uf462"),
    (".eslintrc.json", "\uf462"),
    (".eslintrc.js", "\uf462"),
    (".eslintrc.yml", "\uf462"),
    ("etc", "\ue5fc"),
    ("favicon.ico", "\uf005"),
    ("favicons", "\uf005"),
    ("fstab", "\uf1c0"),
    (".gitattributes", "\uf1d3"),
    (".gitconfig", "\uf1d3"),
    (".git-credentials", "\ue60a"),
    (".github", "\ue5fd"),
    ("gitignore_global", "\uf1d3"),
    (".gitignore", "\uf1d3"),
    (".gitlab-ci.yml", "\uf296"),
    (".gitmodules", "\uf1d3"),
    (".git", "\ue5fb"),
    (".gnupg", "\uf023"),
    ("gradle", "\ue70e"),
    ("group", "\ue615"),
    ("gruntfile.coffee", "\ue611"),
    ("gruntfile.js", "\ue611"),
    ("gruntfile.ls", "\ue611"),
    ("gshadow", "\ue615"),
    ("gulpfile.coffee", "\ue610"),
    ("gulpfile.js", "\ue610"),
    ("gulpfile.ls", "\ue610"),
    ("hidden", "\uf023"),
    ("home", "\uf015"),
    ("hostname", "\ue615"),
    ("hosts", "\U000f0002"),
    (".htaccess", "\ue615"),
    ("htoprc", "\ue615"),
    (".htpasswd", "\ue615"),
    (".idlerc", "\ue235"),
    ("img", "\uf1c5"),
    ("include", "\ue5fc"),
    ("init.el", "\ue779"),
    (".inputrc", "\ue615"),
    ("inputrc", "\ue615"),
    ("js", "\ue74e"),
    (".jupyter", "\ue606"),
    ("kbuild", "\ue615"),
    ("kconfig", "\ue615"),
    ("known_hosts", "\ue60a"),
    (".kshrc", "\uf489"),
    ("lib64", "\uf121"),
    ("lib", "\uf121"),
    ("license.md", "\ue60a"),
    ("licenses", "\ue60a"),
    ("license.txt", "\ue60a"),
    ("license", "\ue60a"),
    ("localized", "\uf179"),
    ("lsb-release", "\ue615"),
    (".lynxrc", "\ue615"),
    (".mailcap", "\U000f01f0"),
    ("mail", "\U000f01f0"),
    ("maintainers", "\ue60a"),
    ("makefile.ac", "\ue615"),
    ("makefile", "\ue615"),
    ("manifest", "\uf292"),
    ("metadata", "\ue5fc"),
    ("metadata.xml", "\uf462"),
    ("mime.types", "\U000f0645"),
    ("module.symvers", "\uf471"),
    (".mozilla", "\ue786"),
    ("music", "\uf025"),
    ("muttrc", "\ue615"),
    (".mutt", "\ue615"),
    ("netlify.toml", "\uf233"),
    ("node_modules", "\ue5fa"),
    (".node_repl_history", "\ue718"),
    ("npmignore", "\ue71e"),
    (".npm", "\ue5fa"),
    ("nvim", "\ue62b"),
    ("os-release", "\ue615"),
    ("package.json", "\ue718"),
    ("package-lock.json", "\ue718"),
    ("packages.el", "\ue779"),
    ("passwd", "\uf023"),
    ("pictures", "\uf03e"),
    ("pkgbuild", "\uf303"),
    (".pki", "\uf023"),
    ("portage", "\ue5fc"),
    ("profile", "\ue615"),
    (".profile", "\ue615"),
    ("public", "\uf415"),
    ("__pycache__", "\U000f0320"),
    (".python_history", "\ue606"),
    ("rc.lua", "\ue615"),
    ("readme", "\ue609"),
    (".release.toml", "\ue7a8"),
    ("requirements.txt", "\U000f0320"),
    ("robots.txt", "\U000f06a9"),
    ("root", "\uf023"),
    ("rubydoc", "\ue73b"),
    ("runtime.txt", "\U000f0320"),
    (".rustup", "\ue7a8"),
    (".rvm", "\ue21e"),
    ("sass", "\ue603"),
    ("sbin", "\ue5fc"),
    ("scripts", "\uf489"),
    ("scss", "\ue603"),
    ("shadow", "\ue615"),
    ("share", "\uf064"),
    (".shellcheckrc", "\ue615"),
    ("shells", "\ue615"),
    (".sqlite_history", "\ue7c4"),
    ("src", "\uf121"),
    (".ssh", "\uf023"),
    ("styles", "\ue749"),
    ("sudoers", "\uf023"),
    ("sxhkdrc", "\ue615"),
    ("tigrc", "\ue615"),
    ("tox.ini", "\ue615"),
    (".trash", "\uf1f8"),
    ("ts", "\ue628"),
    ("unlicense", "\ue60a"),
    ("url", "\uf0ac"),
    ("user-dirs.dirs", "\ue5fc"),
    ("vagrantfile", "\ue615"),
    ("venv", "\U000f0320"),
    ("videos", "\uf03d"),
    (".viminfo", "\ue62b"),
    (".vimrc", "\ue62b"),
    ("vimrc", "\ue62b"),
    (".vim", "\ue62b"),
    ("vim", "\ue62b"),
    (".vscode", "\ue70c"),
    ("webpack.config.js", "\U000f072b"),
    (".wgetrc", "\ue615"),
    ("wgetrc", "\ue615"),
    (".xauthority", "\ue615"),
    (".Xauthority", "\ue615"),
    ("xbps.d", "\ue5fc"),
    (".xinitrc", "\ue615"),
    (".xmodmap", "\ue615"),
    (".Xmodmap", "\ue615"),
    ("xmonad.hs", "\ue615"),
    ("xorg.conf.d", "\ue5fc"),
    (".xprofile", "\ue615"),
    (".Xprofile", "\ue615"),
    (".xresources", "\ue615"),
    ("zathurarc", "\ue615"),
    (".zsh_history", "\ue615"),
    (".zshrc", "\uf489"),
)


def default_icons_by_name() -> dict[str, str]:
    """Return a fresh mapping from file name to its default icon."""
    return dict(_ICONS_BY_NAME)