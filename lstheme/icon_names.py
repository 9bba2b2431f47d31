"""Default icons chosen by a file's whole name."""

from __future__ import annotations

# Names are matched in lower case.
_ICONS_BY_NAME = (
    ("a.out", "\uf489"),
    ("api", "\U000f048d"),
    (".asoundrc", "\ue615"),
    (".atom", "\ue764"),
    (".ash", "\uf489"),
    (".ash_history", "\uf489"),
    ("authorized_keys", "\ue60a"),
    ("assets", "\uf0c7"),
    (".android", "\uf17b"),
    (".audacity-data", "\ue5fc"),
    ("backups", "\U000f006f"),
    (".bash_history", "\U000f1183"),
    (".bash_logout", "\U000f1183"),
    (".bash_profile", "\U000f1183"),
    (".bashrc", "\U000f1183"),
    ("bin", "\ue5fc"),
    (".bpython_history", "\ue606"),
    ("build", "\uf487"),
    ("bspwmrc", "\ue615"),
    ("build.ninja", "\uf0ad"),
    (".cache", "\U000f00e8"),
    ("cache", "\U000f00e8"),
    ("cargo.lock", "\ue68b"),
    ("cargo.toml", "\ue68b"),
    (".cargo", "\ue68b"),
    (".ccls-cache", "\U000f00e8"),
    ("changelog", "\ue609"),
    (".clang-format", "\ue615"),
    ("composer.json", "\ue608"),
    ("composer.lock", "\ue608"),
    ("conf.d", "\ue5fc"),
    ("config.ac", "\ue615"),
    ("config.el", "\ue632"),
    ("config.mk", "\ue615"),
    (".config", "\ue5fc"),
    ("config", "\ue5fc"),
    ("configure", "\uf0ad"),
    ("content", "\uf0c7"),
    ("contributing", "\ue60a"),
    ("copyright", "\ue60a"),
    ("cron.daily", "\ue5fc"),
    ("cron.d", "\ue5fc"),
    ("cron.deny", "\ue615"),
    ("cron.hourly", "\ue5fc"),
    ("cron.monthly", "\ue5fc"),
    ("crontab", "\ue615"),
    ("cron.weekly", "\ue5fc"),
    ("crypttab", "\ue615"),
    (".cshrc", "\U000f1183"),
    ("csh.cshrc", "\U000f1183"),
    ("csh.login", "\U000f1183"),
    ("csh.logout", "\U000f1183"),
    ("css", "\ue749"),
    ("custom.el", "\ue632"),
    (".dbus", "\uf013"),
    ("desktop", "\uf108"),
    ("docker-compose.yml", "\uf308"),
    ("dockerfile", "\uf308"),
    ("doc", "\uf02d"),
    ("dist", "\uf487"),
    ("documents", "\uf02d"),
    (".doom.d", "\ue632"),
    ("downloads", "\U000f024d"),
    (".ds_store", "\uf179"),
    (".editorconfig", "\ue615"),
    (".electron-gyp", "\ue5fa"),
    (".emacs.d", "\ue632"),
    (".env", "\uf462"),
    ("environment", "\uf462"),
    (".eslintrc.json", "\uf462"),
    (".eslintrc.js", "\uf462"),
    (".eslintrc.yml", "\uf462"),
    ("etc", "\ue5fc"),
    ("favicon.ico", "\uf005"),
    ("favicons", "\uf005"),
    (".fennelrc", "\ue615"),
    ("fstab", "\uf1c0"),
    (".fastboot", "\uf17b"),
    (".gitattributes", "\uf1d3"),
    (".gitconfig", "\uf1d3"),
    (".git-credentials", "\ue60a"),
    (".github", "\ue5fd"),
    ("gitignore_global", "\uf1d3"),
    (".gitignore", "\uf1d3"),
    (".gitlab-ci.yml", "\uf296"),
    (".gitmodules", "\uf1d3"),
    (".git", "\ue5fb"),
    (".gnupg", "\U000f08ac"),
    ("go.mod", "\ue627"),
    ("go.sum", "\ue627"),
    ("go.work", "\ue627"),
    ("gradle", "\ue660"),
    ("gradle.properties", "\ue660"),
    ("gradlew", "\ue660"),
    ("gradlew.bat", "\ue660"),
    ("group", "\ue615"),
    ("gruntfile.coffee", "\ue611"),
    ("gruntfile.js", "\ue611"),
    ("gruntfile.ls", "\ue611"),
    ("gshadow", "\ue615"),
    ("gulpfile.coffee", "\ue610"),
    ("gulpfile.js", "\ue610"),
    ("gulpfile.ls", "\ue610"),
    ("heroku.yml", "\ue77b"),
    ("hidden", "\uf023"),
    ("home", "\uf015"),
    ("hostname", "\ue615"),
    ("hosts", "\U000f0002"),
    (".htaccess", "\ue615"),
    ("htoprc", "\ue615"),
    (".htpasswd", "\ue615"),
    (".icons", "\uf005"),
    ("icons", "\uf005"),
    ("id_dsa", "\U000f0dd6"),
    ("id_ecdsa", "\U000f0dd6"),
    ("id_rsa", "\U000f0dd6"),
    (".idlerc", "\ue235"),
    ("img", "\uf1c5"),
    ("include", "\ue5fc"),
    ("init.el", "\ue632"),
    (".inputrc", "\ue615"),
    ("inputrc", "\ue615"),
    (".java", "\ue256"),
    ("jenkinsfile", "\ue66e"),
    ("js", "\ue74e"),
    (".jupyter", "\ue606"),
    ("kbuild", "\ue615"),
    ("kconfig", "\ue615"),
    ("kdeglobals", "\ue615"),
    ("kdenliverc", "\ue615"),
    ("known_hosts", "\ue60a"),
    (".kshrc", "\uf489"),
    ("libexec", "\uf121"),
    ("lib32", "\uf121"),
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
    ("magic", "\uf0d0"),
    ("maintainers", "\ue60a"),
    ("makefile.ac", "\ue615"),
    ("makefile", "\ue615"),
    ("manifest", "\uf292"),
    ("md5sum", "\U000f0565"),
    ("meson.build", "\uf0ad"),
    ("metadata", "\ue5fc"),
    ("metadata.xml", "\uf462"),
    ("media", "\uf40f"),
    (".mime.types", "\U000f0645"),
    ("mime.types", "\U000f0645"),
    ("module.symvers", "\uf471"),
    (".mozilla", "\ue786"),
    ("music", "\U000f1359"),
    ("muttrc", "\ue615"),
    (".muttrc", "\ue615"),
    (".mutt", "\ue615"),
    (".mypy_cache", "\U000f00e8"),
    ("neomuttrc", "\ue615"),
    (".neomuttrc", "\ue615"),
    ("netlify.toml", "\uf233"),
    (".nix-channels", "\uf313"),
    (".nix-defexpr", "\uf313"),
    (".node-gyp", "\ue5fa"),
    ("node_modules", "\ue5fa"),
    (".node_repl_history", "\ue718"),
    ("npmignore", "\ue71e"),
    (".npm", "\ue5fa"),
    ("nvim", "\uf36f"),
    ("obj", "\ue624"),
    ("os-release", "\ue615"),
    ("package.json", "\ue718"),
    ("package-lock.json", "\ue718"),
    ("packages.el", "\ue632"),
    ("pam.d", "\U000f08ac"),
    ("passwd", "\uf023"),
    ("pictures", "\U000f024f"),
    ("pkgbuild", "\uf303"),
    (".pki", "\uf023"),
    ("portage", "\uf30d"),
    ("profile", "\ue615"),
    (".profile", "\ue615"),
    ("public", "\uf415"),
    ("__pycache__", "\ue606"),
    ("pyproject.toml", "\ue606"),
    (".python_history", "\ue606"),
    (".pypirc", "\ue606"),
    ("rc.lua", "\ue615"),
    ("readme", "\ue609"),
    (".release.toml", "\ue68b"),
    ("requirements.txt", "\U000f0320"),
    ("robots.txt", "\U000f06a9"),
    ("root", "\U000f0250"),
    ("rubydoc", "\ue73b"),
    ("runtime.txt", "\U000f0320"),
    (".rustup", "\ue68b"),
    ("rustfmt.toml", "\ue68b"),
    (".rvm", "\ue21e"),
    ("sass", "\ue603"),
    ("sbin", "\ue5fc"),
    ("scripts", "\uf489"),
    ("scss", "\ue603"),
    ("sha256sum", "\U000f0565"),
    ("shadow", "\ue615"),
    ("share", "\uf064"),
    (".shellcheckrc", "\ue615"),
    ("shells", "\ue615"),
    (".spacemacs", "\ue632"),
    (".sqlite_history", "\ue7c4"),
    ("src", "\U000f19fc"),
    (".ssh", "\U000f08ac"),
    ("static", "\uf0c7"),
    ("std", "\U000f0171"),
    ("styles", "\ue749"),
    ("subgid", "\ue615"),
    ("subuid", "\ue615"),
    ("sudoers", "\uf023"),
    ("sxhkdrc", "\ue615"),
    ("template", "\uf32e"),
    ("tests", "\U000f0668"),
    ("tigrc", "\ue615"),
    ("timezone", "\uf43a"),
    ("tox.ini", "\ue615"),
    (".trash", "\uf1f8"),
    ("ts", "\ue628"),
    (".tox", "\ue606"),
    ("unlicense", "\ue60a"),
    ("url", "\uf0ac"),
    ("user-dirs.dirs", "\ue5fc"),
    ("vagrantfile", "\ue615"),
    ("vendor", "\U000f0ae6"),
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
    ("xbps.d", "\uf32e"),
    ("xbps-src", "\uf32e"),
    (".xinitrc", "\ue615"),
    (".xmodmap", "\ue615"),
    (".Xmodmap", "\ue615"),
    ("xmonad.hs", "\ue615"),
    ("xorg.conf.d", "\ue5fc"),
    (".xprofile", "\ue615"),
    (".Xprofile", "\ue615"),
    (".xresources", "\ue615"),
    (".yarnrc", "\ue6a7"),
    ("yarn.lock", "\ue6a7"),
    ("zathurarc", "\ue615"),
    (".zcompdump", "\ue615"),
    (".zlogin", "\U000f1183"),
    (".zlogout", "\U000f1183"),
    (".zprofile", "\U000f1183"),
    (".zsh_history", "\U000f1183"),
    (".zshrc", "\U000f1183"),
)


def default_icons_by_name() -> dict[str, str]:
    """Return a fresh mapping from file name to its default icon."""
    return dict(_ICONS_BY_NAME)