"""Default icons keyed by file extension."""

from __future__ import annotations

# Keys are lower-case extensions without the leading dot.
_ICONS_BY_EXTENSION: tuple[tuple[str, str], ...] = (
    ("1", "\uf02d"),
    ("2", "\uf02d"),
    ("3", "\uf02d"),
    ("4", "\uf02d"),
    ("5", "\uf02d"),
    ("6", "\uf02d"),
    ("7", "\uf02d"),
    ("7z", "\uf410"),
    ("8", "\uf02d"),
    ("ai", "\ue7b4"),
    ("ape", "\uf001"),
    ("apk", "\ue70e"),
    ("asc", "\uf023"),
    ("asm", "\uf471"),
    ("asp", "\uf121"),
    ("a", "\ue624"),
    ("avi", "\uf008"),
    ("avro", "\ue60b"),
    ("awk", "\uf489"),
    ("bak", "\U000f006f"),
    ("bash_history", "\uf489"),
    ("bash_profile", "\uf489"),
    ("bashrc", "\uf489"),
    ("bash", "\uf489"),
    ("bat", "\uf17a"),
    ("bin", "\uf489"),
    ("bio", "\U000f0411"),
    ("bmp", "\uf1c5"),
    ("bz2", "\uf410"),
    ("cc", "\ue61d"),
    ("cfg", "\ue615"),
    ("cjs", "\ue74e"),
    ("class", "\ue738"),
    ("cljs", "\ue76a"),
    ("clj", "\ue768"),
    ("cls", "\ue600"),
    ("cl", "\U000f0172"),
    ("coffee", "\uf0f4"),
    ("conf", "\ue615"),
    ("cpp", "\ue61d"),
    ("cp", "\ue61d"),
    ("cshtml", "\uf1fa"),
    ("csh", "\uf489"),
    ("csproj", "\U000f031b"),
    ("css", "\ue749"),
    ("cs", "\U000f031b"),
    ("csv", "\uf1c3"),
    ("csx", "\U000f031b"),
    ("cts", "\ue628"),
    ("c++", "\ue61d"),
    ("c", "\ue61e"),
    ("cue", "\uf001"),
    ("cxx", "\ue61d"),
    ("dart", "\ue798"),
    ("dat", "\uf1c0"),
    ("db", "\uf1c0"),
    ("deb", "\uf187"),
    ("desktop", "\uf108"),
    ("diff", "\ue728"),
    ("dll", "\uf17a"),
    ("dockerfile", "\uf308"),
    ("doc", "\uf1c2"),
    ("docx", "\uf1c2"),
    ("ds_store", "\uf179"),
    ("dump", "\uf1c0"),
    ("ebook", "\ue28b"),
    ("ebuild", "\uf30d"),
    ("eclass", "\uf30d"),
    ("editorconfig", "\ue615"),
    ("ejs", "\ue618"),
    ("elc", "\U000f0172"),
    ("elf", "\uf489"),
    ("elm", "\ue62c"),
    ("el", "\U000f0172"),
    ("env", "\uf462"),
    ("eot", "\uf031"),
    ("epub", "\ue28a"),
    ("erb", "\ue73b"),
    ("erl", "\ue7b1"),
    ("exe", "\uf17a"),
    ("exs", "\ue62d"),
    ("ex", "\ue62d"),
    ("fish", "\uf489"),
    ("flac", "\uf001"),
    ("flv", "\uf008"),
    ("font", "\uf031"),
    ("fpl", "\U000f0411"),
    ("fsi", "\ue7a7"),
    ("fs", "\ue7a7"),
    ("fsx", "\ue7a7"),
    ("gdoc", "\uf1c2"),
    ("gemfile", "\ue21e"),
    ("gemspec", "\ue21e"),
    ("gform", "\uf298"),
    ("gif", "\uf1c5"),
    ("git", "\uf1d3"),
    ("go", "\ue627"),
    ("gradle", "\ue70e"),
    ("gsheet", "\uf1c3"),
    ("gslides", "\uf1c4"),
    ("guardfile", "\ue21e"),
    ("gz", "\uf410"),
    ("hbs", "\ue60f"),
    ("heic", "\uf1c5"),
    ("heif", "\uf1c5"),
    ("heix", "\uf1c5"),
    ("hh", "\uf0fd"),
    ("hpp", "\uf0fd"),
    ("hs", "\ue777"),
    ("html", "\uf13b"),
    ("htm", "\uf13b"),
    ("h", "\uf0fd"),
    ("hxx", "\uf0fd"),
    ("ico", "\uf1c5"),
    ("image", "\uf1c5"),
    ("img", "\uf1c0"),
    ("iml", "\ue7b5"),
    ("info", "\ue795"),
    ("ini", "\ue615"),
    ("ipynb", "\ue606"),
    ("iso", "\uf1c0"),
    ("j2", "\ue000"),
    ("jar", "\ue738"),
    ("java", "\ue738"),
    ("jinja", "\ue000"),
    ("jl", "\ue624"),
    ("jpeg", "\uf1c5"),
    ("jpg", "\uf1c5"),
    ("jsonc", "\ue60b"),
    ("json", "\ue60b"),
    ("js", "\ue74e"),
    ("jsx", "\ue7ba"),
    ("key", "\ue60a"),
    ("ksh", "\uf489"),
    ("kt", "\ue634"),
    ("kts", "\ue634"),
    ("ldb", "\uf1c0"),
    ("ld", "\ue624"),
    ("less", "\ue758"),
    ("lhs", "\ue777"),
    ("license", "\ue60a"),
    ("lisp", "\U000f0172"),
    ("list", "\uf03a"),
    ("localized", "\uf179"),
    ("lock", "\uf023"),
    ("log", "\uf18d"),
    ("lss", "\ue749"),
    ("lua", "\ue620"),
    ("lz", "\uf410"),
    ("m3u8", "\U000f0411"),
    ("m3u", "\U000f0411"),
    ("m4a", "\uf001"),
    ("m4v", "\uf008"),
    ("magnet", "\uf076"),
    ("man", "\uf02d"),
    ("markdown", "\ue609"),
    ("md", "\ue609"),
    ("mjs", "\ue74e"),
    ("mkd", "\ue609"),
    ("mk", "\uf085"),
    ("mkv", "\uf008"),
    ("mobi", "\ue28b"),
    ("mov", "\uf008"),
    ("mp3", "\uf001"),
    ("mp4", "\uf008"),
    ("msi", "\uf17a"),
    ("mts", "\ue628"),
    ("mustache", "\ue60f"),
    ("nix", "\uf313"),
    ("npmignore", "\ue71e"),
    ("ogg", "\uf001"),
    ("ogv", "\uf008"),
    ("old", "\U000f006f"),
    ("opus", "\uf001"),
    ("orig", "\U000f006f"),
    ("otf", "\uf031"),
    ("o", "\ue624"),
    ("pdf", "\uf1c1"),
    ("pem", "\U000f0306"),
    ("phar", "\ue608"),
    ("php", "\ue608"),
    ("pkg", "\uf187"),
    ("plist", "\uf302"),
    ("pls", "\U000f0411"),
    ("pl", "\ue769"),
    ("pm", "\ue769"),
    ("png", "\uf1c5"),
    ("ppt", "\uf1c4"),
    ("pptx", "\uf1c4"),
    ("procfile", "\ue21e"),
    ("properties", "\ue60b"),
    ("ps1", "\uf489"),
    ("psd", "\ue7b8"),
    ("pub", "\ue60a"),
    ("pxm", "\uf1c5"),
    ("pyc", "\ue606"),
    ("py", "\ue606"),
    ("rakefile", "\ue21e"),
    ("rar", "\uf410"),
    ("razor", "\uf1fa"),
    ("rb", "\ue21e"),
    ("rdata", "\U000f07d4"),
    ("rdb", "\ue76d"),
    ("rdoc", "\ue609"),
    ("rds", "\U000f07d4"),
    ("readme", "\ue609"),
    ("rlib", "\ue7a8"),
    ("rl", "\uf11c"),
    ("rmd", "\ue609"),
    ("rpm", "\uf187"),
    ("rproj", "\U000f05c6"),
    ("rspec_parallel", "\ue21e"),
    ("rspec_status", "\ue21e"),
    ("rspec", "\ue21e"),
    ("rss", "\uf09e"),
    ("rs", "\ue7a8"),
    ("rtf", "\uf15c"),
    ("rubydoc", "\ue73b"),
    ("r", "\U000f07d4"),
    ("ru", "\ue21e"),
    ("sass", "\ue603"),
    ("scala", "\ue737"),
    ("scpt", "\uf302"),
    ("scss", "\ue603"),
    ("shell", "\uf489"),
    ("sh", "\uf489"),
    ("sig", "\ue60a"),
    ("slim", "\ue73b"),
    ("sln", "\ue70c"),
    ("so", "\ue624"),
    ("sqlite3", "\ue7c4"),
    ("sql", "\uf1c0"),
    ("srt", "\uf02d"),
    ("styl", "\ue600"),
    ("stylus", "\ue600"),
    ("sublime-package", "\ue7aa"),
    ("sublime-session", "\ue7aa"),
    ("sub", "\uf02d"),
    ("s", "\uf471"),
    ("svg", "\uf1c5"),
    ("swift", "\ue755"),
    ("swp", "\ue62b"),
    ("sym", "\ue624"),
    ("tar", "\uf410"),
    ("tex", "\ue600"),
    ("tgz", "\uf410"),
    ("tiff", "\uf1c5"),
    ("toml", "\ue60b"),
    ("torrent", "\U000f048d"),
    ("trash", "\uf1f8"),
    ("ts", "\ue628"),
    ("tsx", "\ue7ba"),
    ("ttc", "\uf031"),
    ("ttf", "\uf031"),
    ("t", "\ue769"),
    ("twig", "\ue61c"),
    ("txt", "\uf15c"),
    ("video", "\uf008"),
    ("vim", "\ue62b"),
    ("vlc", "\U000f0411"),
    ("vue", "\U000f0844"),
    ("wav", "\uf001"),
    ("webm", "\uf008"),
    ("webp", "\uf1c5"),
    ("windows", "\uf17a"),
    ("wma", "\uf001"),
    ("wmv", "\uf008"),
    ("woff2", "\uf031"),
    ("woff", "\uf031"),
    ("wpl", "\U000f0411"),
    ("xbps", "\uf187"),
    ("xcf", "\uf1c5"),
    ("xls", "\uf1c3"),
    ("xlsx", "\uf1c3"),
    ("xml", "\uf121"),
    ("xul", "\uf269"),
    ("xz", "\uf410"),
    ("yaml", "\ue60b"),
    ("yml", "\ue60b"),
    ("zip", "\uf410"),
    ("zig", "\ue6a9"),
    ("zshrc", "\uf489"),
    ("zsh-theme", "\uf489"),
    ("zsh", "\uf489"),
    ("zst", "\uf410"),
)


def default_icons_by_extension() -> dict[str, str]:
    """Return a fresh mapping from file extension to its default icon."""
    return dict(_ICONS_BY_EXTENSION)