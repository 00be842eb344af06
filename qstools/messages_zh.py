"""The zh_CN message catalogue."""

from __future__ import annotations

__all__ = ["zh_cn_messages"]

_MESSAGES = {
    "%s  %s  %s  %s\n": "%s  %s  %s  %s\n",
    "%s\n": "%s\n",
    "-r is required to copy a directory": "复制目录必须要有 -r 参数",
    "-r is required to move a directory": "删除目录必须要有 -r 参数",
    "-r is required to remove a directory": "删除目录必须要有 -r 参数",
    "<%s> copied\n": "<%s> 已复制\n",
    "<%s> moved\n": "<%s> 已移动\n",
    "<%s> removed\n": "<%s> 已删除\n",
    "<%s> synced\n": "<%s> 已同步\n",
    "Bucket <%s> created.\n": "Bucket <%s> 已创建。\n",
    "Bucket <%s> removed.\n": "Bucket <%s> 已删除。\n",
    "Cat object: qsctl cat qs://prefix/a": "输出一个文件的内容到标准输出: qsctl cat qs://prefix/a",
    "Config not loaded, use default and environment value instead.": (
        "配置未加载，使用默认值和环境变量代替。"
    ),
    "Copy all files in folder: qsctl cp /path/to/folder/ qs://prefix/a/ -r": (
        "复制一个文件夹中的所有文件: qsctl cp /path/to/folder/ qs://prefix/a/ -r"
    ),
    "Copy file: qsctl cp /path/to/file qs://prefix/a": "复制文件: qsctl cp / path/to/file qs://prefix/a",
    "Copy folder: qsctl cp /path/to/folder qs://prefix/a/ -r": (
        "复制文件夹: qsctl cp /path/to/folder qs://prefix/a/ -r"
    ),
    "Count: %s": "数量: %s",
    "Delete an empty qingstor bucket or forcely delete nonempty qingstor bucket.": (
        "删除空 Bucket 或强制删除非空 Bucket。"
    ),
    "Dir <%s> and <%s> synced.\n": "文件夹 <%s> and <%s> 已同步。\n",
    "Dir <%s> copied to <%s>.\n": "文件夹 <%s> 已复制到 <%s>.\n",
    "Dir <%s> moved to <%s>.\n": "文件夹 <%s> 已移动到 <%s>.\n",
    "Dir <%s> removed.\n": "文件夹 <%s> 已删除。\n",
    "ETag: %s": "ETag: %s",
    "Execute %s command error: %s\n": "执行 %s 命令错误: %s\n",
    "File <%s> copied to <%s>.\n": "文件 <%s> 已复制到 <%s>.\n",
    "File <%s> moved to <%s>.\n": "文件 <%s> 已移动到 <%s>.\n",
    "File <%s> removed.\n": "文件 <%s> 已删除。\n",
    "Key: %s": "名称: %s",
    "List bucket's all objects: qsctl ls qs://bucket-name -R": (
        "列出 Bucket 中的所有对象: qsctl ls qs://bucket-name -R"
    ),
    "List buckets by long format: qsctl ls -l": "按详细格式列出桶: qsctl ls -l",
    "List buckets: qsctl ls": "列出 Bucket: qsctl ls",
    "List objects by long format: qsctl ls qs://bucket-name -l": (
        "使用详细格式列出对象: qsctl ls qs://bucket-name -l"
    ),
    "List objects with prefix recursively: qsctl ls qs://bucket-name/prefix -R": (
        "递归地列出带指定前缀的对象: qsctl ls qs://bucket-name/prefix -R"
    ),
    "List objects with prefix: qsctl ls qs://bucket-name/prefix": (
        "列出带指定前缀的对象: qsctl ls qs://bucket-name/prefix"
    ),
    "Load config failed [%v]": "加载配置失败 [%v]",
    "Location: %s": "位置: %s",
    "Make bucket: qsctl mb bucket-name --zone=zone-name": "创建桶: qsctl mb bucket-name --zone=zone-name",
    "Move all files in folder: qsctl mv /path/to/folder/ qs://prefix/a/ -r": (
        "移动文件夹中的所有文件: qsctl mv /path/to/folder/ qs://prefix/a/ -r"
    ),
    "Move file: qsctl mv /path/to/file qs://prefix/a": "移动文件: qsctl mv /path/to/file qs://prefix/a",
    "Move folder: qsctl mv /path/to/folder qs://prefix/a/ -r": (
        "移动文件夹: qsctl mv /path/to/folder qs://prefix/a/ -r"
    ),
    "Name: %s": "名称: %s",
    "Only sync files that already exist on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --existing": (
        "仅同步那些已存在于目标路径中的文件: qsctl sync . qs://bucket-name/dir/ --existing"
    ),
    "Only sync files that newer than files on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --update": (
        "仅同步那些比目标路径中更加新的文件: qsctl sync . qs://bucket-name/dir/ --update"
    ),
    "Presign object: qsctl qs://bucket-name/object-name": "预签名对象: qsctl qs://bucket-name/object-name",
    "Read from stdin: cat /path/to/file | qsctl cp - qs://prefix/stdin": (
        "从 stdin 读取并上传: cat /path/to/file | qsctl cp - qs://prefix/stdin"
    ),
    "Remove a single object: qsctl rm qs://bucket-name/object-key": (
        "删除单个对象: qsctl rm qs://bucket-name/object-key"
    ),
    "Remove objects with prefix: qsctl rm qs://bucket-name/prefix -r": (
        "删除所有带指定前缀的对象: qsctl rm qs://bucket-name/prefix -r"
    ),
    "Show files that would sync (but not really do): "
    "qsctl sync . qs://bucket-name/dir/ --dry-run": (
        "显示所有将会被同步的文件 (但并不真正执行同步操作): "
        "qsctl sync . qs://bucket-name/dir/ --dry-run"
    ),
    "Size: %s": "大小: %s",
    "Start shell: qsctl shell": "启动 Shell: qsctl shell",
    "Stat bucket: qsctl stat qs://bucket-name": "查看桶信息: qsctl stat qs://bucket-name",
    "Stat object: qsctl stat qs://prefix/a": "查看文件信息: qsctl stat qs://prefix/a",
    "Stdin copied to <%s>.\n": "复制标准输入到 <%s>.\n",
    "StorageClass: %s": "存储类型: %s",
    "Sync QS-Directory to local directory: qsctl sync qs://bucket-name/test/ test_local/": (
        "同步 QS-Directory 到本地目录: qsctl sync qs://bucket-name/test/ test_local/"
    ),
    "Sync directory recursively: qsctl sync qs://bucket-name/test/ test_local/ -r": (
        "递归地同步目录: qsctl sync qs://bucket-name/test/ test_local/ -r"
    ),
    "Sync local directory to QS-Directory: qsctl sync . qs://bucket-name/dir/": (
        "同步当前目录到 QS-Directory: qsctl sync . qs://bucket-name/dir/"
    ),
    "Sync skip updating files that already exist on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --ignore-existing": (
        "同步文件夹，但跳过目标路径中已经存在的文件: "
        "qsctl sync . qs://bucket-name/dir/ --ignore-existing"
    ),
    "Tee object: qsctl tee qs://prefix/a": "输出一个文件的内容到标准输出: qsctl tee qs://prefix/a",
    "Type: %s": "类型: %s",
    "UpdatedAt: %s": "更新于: %s",
    "Write to stdout: qsctl cp qs://prefix/b - > /path/to/file": (
        "写入到标准输出: qsctl cp qs://prefix/b - > /path/to/file"
    ),
    "assign config path manually": "手动分配配置路径",
    "both --existing and --ignore-existing are set, no files would be synced": (
        "同时设定 --existing 和 --ignore-exist，则不会同步文件"
    ),
    "both source and destination should be directories": "源和目标均应为目录",
    "cannot copy a directory to a non-directory dest": "无法将一个目录复制到非目录路径",
    "cannot move a directory to a non-directory dest": "无法将一个目录移动到非目录路径",
    "cat a remote object to stdout": "输出远程对象内容到标准输出",
    "confirm to remove <%s>? [y/N] ": "确认删除 <%s>? [y/N] ",
    "copy directory recursively": "递归复制目录",
    "copy from/to qingstor": "复制从/到 QingStor 对象存储",
    "delete a bucket": "删除一个 Bucket",
    "delete an empty bucket: qsctl rb qs://bucket-name": "删除空 Bucket: qsctl rb qs://bucket-name",
    "enable benchmark or not": "启用性能测试与否",
    "flag zone is required, but not found": "参数 zone 是必需的，但没有找到",
    "forcely delete a nonempty bucket: qsctl rb qs://bucket-name -f": (
        "强制删除一个非空桶: qsctl rb qs://bucket-name -f"
    ),
    "get args failed: %s\n": "获取参数失败: %s\n",
    "get metadata failed: %v\n": "获取元数据失败: %v\n",
    "get the pre-signed URL by the object key": "通过对象键获取预签名的 URL",
    "help for this command": "帮助信息",
    "in which zone to do the operation": "在哪个区域执行操作",
    "input bucket name <%s> to confirm: ": "输入桶名称 <%s> 以确认: ",
    "list objects or buckets": "列出对象或 Bucket",
    "make a new bucket": "创建一个新的 Bucket",
    "move directory recursively": "递归移动目录",
    "move from/to qingstor": "移动从/到 QingStor 对象存储",
    "not confirmed": "未确认",
    "not interactive shell, cannot call shell": "非交互式 shell，无法调用 shell",
    "parse size <%v> failed [%v], key: <%s>\n": "解析大小 <%v> 失败 [%v], 密钥: <%s>\n",
    "parse size <%v> failed [%v]\n": "解析大小 <%v> 失败 [%v]\n",
    "path should be a directory while -r is set": "当 -r 参数设置时，路径需要是一个目录",
    "pipe not supported in shell, input after %v would be abandoned\n": (
        "shell 不支持管道操作， %v 之后的输入将被抛弃\n"
    ),
    "print logs for debug": "打印调试日志",
    "qsctl cat can cat a remote object to stdout": "qsctl cat 可以将远程对象内容输出到标准输出",
    "qsctl cp can copy file/folder/stdin to qingstor or copy qingstor objects to local/stdout": (
        "qsctl cp 可以将文件/文件夹/stdin 复制到 QingStor 对象存储或复制对象到本地/stdout"
    ),
    "qsctl mv can move file/folder to qingstor or move qingstor objects to local": (
        "qsctl mv 可以将文件/文件夹移动到 QingStor 对象存储或移动对象到本地"
    ),
    "qsctl rb delete a qingstor bucket": "qscl rb 将删除一个 Bucket",
    "qsctl rm remove the object with given object key": "qsctl rm 将删除给定 Object Key 的对象",
    "qsctl shell can execute command interactively, input exit to quit": (
        "qscl shell 可以交互执行命令，输入 exit 以退出"
    ),
    "qsctl stat show the detailed info of this object": "qsctl stat 将显示此对象的详细信息",
    "recursively delete keys under a specific prefix": "递归删除指定前缀下的对象",
    "recursively list subdirectories encountered": "递归列出遇到的子目录",
    "regular expression for files to exclude": "指定排除哪些文件的正则表达式",
    "regular expression for files to include (not work if exclude-regx not set)": (
        "指定包括哪些文件的表达式 (如果排除正则表达式未设置则不生效)"
    ),
    "remove a remote object": "删除远程对象",
    "segment id <%s>, path <%s> removed\n": "ID <%s>, 路径 <%s> 的分段已删除\n",
    "set part size for multipart upload": "设置分段上传的片段大小",
    "set threshold to enable multipart upload": "设置启用分段上传的阈值",
    "src should be a directory while -r is set": "当 -r 参数设置时，源路径需要是一个目录",
    "start an interactive shell of qsctl": "启动一个 qsctl 的交互式 shell",
    "stat a remote object": "查看远程对象的信息",
    "sync between local directory and QS-Directory": "同步本地目录和对象存储目录",
    "tee a remote object from stdin": "从标准输入读取内容并上传",
    "the number of seconds until the pre-signed URL expires. Default is 300 seconds": (
        "预签名URL到期前的秒数。默认值为300秒"
    ),
    "\n"
    'To execute command, directly type command without "qsctl" at the beginning.\n'
    '"Ctrl + D" or input "exit" to exit.\n'
    "Version %s\n": (
        "\n"
        '要执行命令，直接键入命令即可，不需要以 "qsctl" 开头。\n'
        '输入组合键 "Ctrl + D" 或者 "exit" 命令以退出。\n'
        "版本 %s\n"
    ),
    "expected size of the input file\n"
    "accept: 100MB, 1.8G\n"
    "(only used and required for input from stdin)": (
        "预计输入文件的大小\n"
        "接受的大小形似: 100MB, 1.8G\n"
        "(仅用于标准输入) "
    ),
    "list in long format and a total sum for all the file sizes is\n"
    "output on a line before the long listing": (
        "输出长格式列表，并且长列表前一行输出所有文件大小的总和"
    ),
    "maximum content loaded in memory\n"
    "(only used for input from stdin)": (
        "在内存中加载的最大内容\n"
        "(仅用于标准输入)"
    ),
    "print size by using unit suffixes: Byte, Kilobyte, Megabyte, Gigabyte, "
    "Terabyte and Petabyte,\n"
    "in order to reduce the number of digits to three or less using base 2 for sizes": (
        "打印 object 大小信息，使用如下单位后缀(二进制): Byte, Kilobyte, Megabyte, "
        "Gigabyte, Terabyte 和 Petabyte，\n"
        "并将数字数减少到三个或三个以下的大小显示"
    ),
    "qsctl ls can list all qingstor buckets or qingstor keys under a prefix.": (
        "qsctl ls 可以列出所有 Bucket 或者按前缀列出 QingStor 对象。"
    ),
    "qsctl mb can make a new bucket with the specific name,\n"
    "\n"
    "bucket name should follow DNS name rule with:\n"
    "* length between 6 and 63;\n"
    "* can only contains lowercase letters, numbers and hyphen -\n"
    "* must start and end with lowercase letter or number\n"
    "* must not be an available IP address\n"
    "\t": (
        "qsctl mb 可以用指定名称创建一个新的 Bucket。\n"
        "\n"
        "bucket 名称应该遵循DNS名称规则:\n"
        "* 长度介于 6 到 63 之间。\n"
        "* 只能包含小写字母 数字和连线 -\n"
        "* 必须以小写字母或数字开头和结尾\n"
        "* 不能是可用的 IP 地址\n"
    ),
    "qsctl presign can generate a pre-signed URL for the object.\n"
    "Within the given expire time, anyone who receives this URL can retrieve\n"
    "the object with an HTTP GET request. If an object belongs to a public bucket,\n"
    "generate a URL spliced by bucket name, zone and its name, anyone who receives\n"
    "this URL can always retrieve the object with an HTTP GET request.": (
        "qsctl presign 可以为对象生成一个预签名的 URL。\n"
        "在给定的时间内，任何拥有该链接的人都可以通过 HTTP GET 请求获取这个文件。"
        "如果这个文件属于一个公开的 Bucket，任何拥有该链接的人总是能够通过 HTTP GET 请求访问这个文件。"
    ),
    "qsctl sync between local directory and QS-Directory. The first path argument\n"
    "is the source directory and second the destination directory.": (
        "qsctl 在本地目录与 QS-Directory 之间同步. 第一个参数\\n是源目录，第二个参数是目标目录."
    ),
    "qsctl tee can tee a remote object from stdin.\n"
    "\n"
    "NOTICE: qsctl will not tee the content to stdout like linux tee command does.\n": (
        "qsctl tee 可以从 stdin 读取并上传文件。\n"
        "\n"
        "注意: qsctl 将不会像 Linux tee 命令那样将内容绑定到标准输出。\n"
    ),
    "recurse into sub directories": "递归到子目录",
    "show what would have been transferred": "显示哪些文件将会被传输",
    "skip creating new files in dest dirs": "并不在目标目录中创建新的文件",
    "skip files that are newer in dest dirs": "跳过同步那些在目标目录中 (比源目录) 更加新的文件",
    "skip updating files in dest dirs, only copy those not exist": (
        "跳过在目标目录中执行更新已存在文件的操作，仅复制那些目标目录中不存在的文件"
    ),
    "use the specified FORMAT instead of the default;\n"
    "output a newline after each use of FORMAT\n"
    "\n"
    "The valid format sequences for files:\n"
    "\n"
    "  %F   file type\n"
    "  %h   content etag of the file\n"
    "  %n   file name\n"
    "  %s   total size, in bytes\n"
    "  %y   time of last data modification, human-readable, "
    "e.g: 2006-01-02 15:04:05 +0000 UTC\n"
    "  %Y   time of last data modification, seconds since Epoch\n"
    "\n"
    "The valid format sequences for buckets:\n"
    "\n"
    "  %n   bucket name\n"
    "  %l   bucket location\n"
    "  %s   total size, in bytes\n"
    "  %c   count of files in this bucket\n"
    "\t": (
        "使用指定的 格式化字符串 代替默认格式；\n"
        "以下每一行列举一种 格式化字符串 的用法\n"
        "\n"
        "可用的文件信息的格式化占位符有:\n"
        "\n"
        "%F   文件类型\n"
        "%h   文件内容的 etag 信息\n"
        "%n   文件名\n"
        "%s   文件大小，单位为字节\n"
        "%y   最后一次数据修改的时间，显示为可读格式，例如: 2006-01-02 15:04:05 +0000 UTC\n"
        "%Y   最后一次数据修改的时间，显示为 Unix 时间戳，也就是从1970年1月1日起所经历的秒数\n"
        "\n"
        "可用的桶格式占位符有:\n"
        "%n 桶名称\n"
        "%l 桶位置\n"
        "%s 总大小\n"
        "%c 总文件数量\n"
    ),
}


def zh_cn_messages() -> dict[str, str]:
    """Return a fresh zh_CN catalogue mapping each template to its translation."""
    return dict(_MESSAGES)