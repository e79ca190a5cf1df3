# -*- coding: utf-8 -*-
#
# This file is part of libvirt-enum.
#
# libvirt-enum is free software: you can redistribute it and/or modify it under the terms of the
# GNU General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# libvirt-enum is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with libvirt-enum.  If
# not, see <http://www.gnu.org/licenses/>.

# libvirt connection URI, None lets libvirt pick the default
URI = None

# treat raw values missing from the tables as an error instead of printing them
STRICT = False

CONFIG_FILE = 'virsh-enum.conf'
