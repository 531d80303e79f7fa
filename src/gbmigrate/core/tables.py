"""Static migration tables: section menu, known link titles, directive spellings"""

from gbmigrate.core.models import SectionInfo


# <target>/<top-level directory> -> menu entry for the synthesized _index.md
SECTIONS: dict[str, SectionInfo] = {
    "dcs/storage":                        SectionInfo(title="Decentralized Cloud Storage", weight=10),
    "dcs/downloads":                      SectionInfo(title="Downloads", weight=20),
    "dcs/getting-started":                SectionInfo(title="Getting Started", weight=30),
    "dcs/api-reference":                  SectionInfo(title="SDK & Reference", weight=40),
    "dcs/how-tos":                        SectionInfo(title="How To's", weight=50),
    "dcs/solution-architectures":         SectionInfo(title="Solution Architectures", weight=60),
    "dcs/concepts":                       SectionInfo(title="Concepts", weight=70),
    "dcs/support":                        SectionInfo(title="Support", weight=80),
    "dcs/billing-payment-and-accounts-1": SectionInfo(title="Billing, Payment & Accounts", weight=90),

    "node/before-you-begin":       SectionInfo(title="Before You Begin", weight=10),
    "node/dependencies":           SectionInfo(title="Dependencies", weight=20),
    "node/setup":                  SectionInfo(title="Setup", weight=30),
    "node/sno-applications":       SectionInfo(title="SNO Applications", weight=40),
    "node/resources":              SectionInfo(title="Resources", weight=50),
    "node/solution-architectures": SectionInfo(title="Solution Architectures", weight=60),
}

# Visible text for `{% embed url="..." %}` links
LINK_TITLES: dict[str, str] = {
    "https://docs.microsoft.com/en-us/windows-server/administration/openssh/openssh_install_firstuse":
        "Get started with OpenSSH",
    "https://docs.microsoft.com/en-us/windows-server/administration/openssh/openssh_install_firstuse#installing-openssh-with-powershell":
        "Install OpenSSH using Windows Settings",
    "https://docs.microsoft.com/en-us/windows-server/administration/openssh/openssh_server_configuration#windows-configurations-in-sshd_config":
        "Windows Configurations in sshd_config",
    "https://docs.microsoft.com/en-us/windows/wsl/install-win10":
        "Install WSL",
    "https://osxdaily.com/2016/08/16/enable-ssh-mac-command-line/":
        "How to Enable SSH on a Mac from the Command Line",
    "https://osxdaily.com/2016/08/16/enable-ssh-mac-command-line":
        "How to Enable SSH on a Mac from the Command Line",
    "https://superuser.com/questions/364304/how-do-i-configure-ssh-on-os-x":
        "How do I configure SSH on OS X?",
}

# Lowercased tab title -> canonical spelling
TAB_TITLES: dict[str, str] = {
    "macos": "macOS",
}

HINT_STYLES = ("info", "warning", "danger", "success")

# Embed blocks with a caption that map onto Hugo's youtube shortcode
VIDEO_EMBEDS: dict[str, str] = {
    '{% embed url="https://www.youtube.com/watch?v=H6bRljVjR48" %}\n'
    'Video Tutorial for the Setup Process\n'
    '{% endembed %}': "{{< youtube H6bRljVjR48 >}}",
}

# Legacy asset files without an extension; copied and linked as <n>-fix.png
LEGACY_ASSETS = ("0", "1", "2", "3")
