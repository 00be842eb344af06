"""The en_US message catalogue: every template translates to itself."""

from __future__ import annotations

__all__ = ["en_us_messages"]

_MESSAGES = (
    "%s  %s  %s  %s\n",
    "%s\n",
    "-r is required to copy a directory",
    "-r is required to move a directory",
    "-r is required to remove a directory",
    "<%s> copied\n",
    "<%s> moved\n",
    "<%s> removed\n",
    "<%s> synced\n",
    "Bucket <%s> created.\n",
    "Bucket <%s> removed.\n",
    "Cat object: qsctl cat qs://prefix/a",
    "Config not loaded, use default and environment value instead.",
    "Copy all files in folder: qsctl cp /path/to/folder/ qs://prefix/a/ -r",
    "Copy file: qsctl cp /path/to/file qs://prefix/a",
    "Copy folder: qsctl cp /path/to/folder qs://prefix/a/ -r",
    "Count: %s",
    "Delete an empty qingstor bucket or forcely delete nonempty qingstor bucket.",
    "Dir <%s> and <%s> synced.\n",
    "Dir <%s> copied to <%s>.\n",
    "Dir <%s> moved to <%s>.\n",
    "Dir <%s> removed.\n",
    "ETag: %s",
    "Error: at least one arg is needed for %s",
    "Execute %s command error: %s\n",
    "File <%s> copied to <%s>.\n",
    "File <%s> moved to <%s>.\n",
    "File <%s> removed.\n",
    "Key: %s",
    "List bucket's all objects: qsctl ls qs://bucket-name -R",
    "List buckets by long format: qsctl ls -l",
    "List buckets: qsctl ls",
    "List objects by long format: qsctl ls qs://bucket-name -l",
    "List objects with prefix recursively: qsctl ls qs://bucket-name/prefix -R",
    "List objects with prefix: qsctl ls qs://bucket-name/prefix",
    "Load config failed [%v]",
    "Location: %s",
    "Make bucket: qsctl mb bucket-name --zone=zone-name",
    "Move all files in folder: qsctl mv /path/to/folder/ qs://prefix/a/ -r",
    "Move file: qsctl mv /path/to/file qs://prefix/a",
    "Move folder: qsctl mv /path/to/folder qs://prefix/a/ -r",
    "Name: %s",
    "Only sync files that already exist on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --existing",
    "Only sync files that newer than files on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --update",
    "Presign object: qsctl qs://bucket-name/object-name",
    "Read from stdin: cat /path/to/file | qsctl cp - qs://prefix/stdin",
    "Remove a single object: qsctl rm qs://bucket-name/object-key",
    "Remove objects with prefix: qsctl rm qs://bucket-name/prefix -r",
    "Show files that would sync (but not really do): "
    "qsctl sync . qs://bucket-name/dir/ --dry-run",
    "Size: %s",
    "Start shell: qsctl shell",
    "Stat bucket: qsctl stat qs://bucket-name",
    "Stat object: qsctl stat qs://prefix/a",
    "Stdin copied to <%s>.\n",
    "StorageClass: %s",
    "Sync QS-Directory to local directory: qsctl sync qs://bucket-name/test/ test_local/",
    "Sync directory recursively: qsctl sync qs://bucket-name/test/ test_local/ -r",
    "Sync local directory to QS-Directory: qsctl sync . qs://bucket-name/dir/",
    "Sync skip updating files that already exist on receiver: "
    "qsctl sync . qs://bucket-name/dir/ --ignore-existing",
    "Tee object: qsctl tee qs://prefix/a",
    "Type: %s",
    "UpdatedAt: %s",
    "Write to stdout: qsctl cp qs://prefix/b - > /path/to/file",
    "assign config path manually",
    "both --existing and --ignore-existing are set, no files would be synced",
    "both source and destination should be directories",
    "cannot copy a directory to a non-directory dest",
    "cannot move a directory to a non-directory dest",
    "cat a remote object to stdout",
    "confirm to remove <%s>? [y/N] ",
    "copy directory recursively",
    "copy from/to qingstor",
    "delete a bucket",
    "delete an empty bucket: qsctl rb qs://bucket-name",
    "enable benchmark or not",
    "flag zone is required, but not found",
    "forcely delete a nonempty bucket: qsctl rb qs://bucket-name -f",
    "get args failed: %s\n",
    "get metadata failed: %v\n",
    "get the pre-signed URL by the object key",
    "help for this command",
    "in which zone to do the operation",
    "input bucket name <%s> to confirm: ",
    "list objects or buckets",
    "make a new bucket",
    "move directory recursively",
    "move from/to qingstor",
    "not confirmed",
    "not interactive shell, cannot call shell",
    "parse size <%v> failed [%v], key: <%s>\n",
    "parse size <%v> failed [%v]\n",
    "path should be a directory while -r is set",
    "pipe not supported in shell, input after %v would be abandoned\n",
    "print logs for debug",
    "qsctl cat can cat a remote object to stdout",
    "qsctl cp can copy file/folder/stdin to qingstor or copy qingstor objects to local/stdout",
    "qsctl mv can move file/folder to qingstor or move qingstor objects to local",
    "qsctl rb delete a qingstor bucket",
    "qsctl rm remove the object with given object key",
    "qsctl shell can execute command interactively, input exit to quit",
    "qsctl stat show the detailed info of this object",
    "recursively delete keys under a specific prefix",
    "recursively list subdirectories encountered",
    "regular expression for files to exclude",
    "regular expression for files to include (not work if exclude-regx not set)",
    "remove a remote object",
    "segment id <%s>, path <%s> removed\n",
    "set part size for multipart upload",
    "set threshold to enable multipart upload",
    "src should be a directory while -r is set",
    "start an interactive shell of qsctl",
    "stat a remote object",
    "sync between local directory and QS-Directory",
    "tee a remote object from stdin",
    "the number of seconds until the pre-signed URL expires. Default is 300 seconds",
    "\n"
    'To execute command, directly type command without "qsctl" at the beginning.\n'
    '"Ctrl + D" or input "exit" to exit.\n'
    "Version %s\n",
    "expected size of the input file\n"
    "accept: 100MB, 1.8G\n"
    "(only used and required for input from stdin)",
    "list in long format and a total sum for all the file sizes is\n"
    "output on a line before the long listing",
    "maximum content loaded in memory\n"
    "(only used for input from stdin)",
    "print size by using unit suffixes: Byte, Kilobyte, Megabyte, Gigabyte, "
    "Terabyte and Petabyte,\n"
    "in order to reduce the number of digits to three or less using base 2 for sizes",
    "qsctl ls can list all qingstor buckets or qingstor keys under a prefix.",
    "qsctl mb can make a new bucket with the specific name,\n"
    "\n"
    "bucket name should follow DNS name rule with:\n"
    "* length between 6 and 63;\n"
    "* can only contains lowercase letters, numbers and hyphen -\n"
    "* must start and end with lowercase letter or number\n"
    "* must not be an available IP address\n"
    "\t",
    "qsctl presign can generate a pre-signed URL for the object.\n"
    "Within the given expire time, anyone who receives this URL can retrieve\n"
    "the object with an HTTP GET request. If an object belongs to a public bucket,\n"
    "generate a URL spliced by bucket name, zone and its name, anyone who receives\n"
    "this URL can always retrieve the object with an HTTP GET request.",
    "qsctl sync between local directory and QS-Directory. The first path argument\n"
    "is the source directory and second the destination directory.",
    "qsctl tee can tee a remote object from stdin.\n"
    "\n"
    "NOTICE: qsctl will not tee the content to stdout like linux tee command does.\n",
    "recurse into sub directories",
    "show what would have been transferred",
    "skip creating new files in dest dirs",
    "skip files that are newer in dest dirs",
    "skip updating files in dest dirs, only copy those not exist",
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
    "\t",
)


def en_us_messages() -> dict[str, str]:
    """Return a fresh en_US catalogue mapping each template to its translation."""
    return {message: message for message in _MESSAGES}